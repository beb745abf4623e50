CARD_WIDTH = 72
CARD_HEIGHT = 100
STACK_GAP = 18
VISIBLE_STEP = 24
MARGIN = 20
STATUS_HEIGHT = 28

CARD_SCALE_ORDER = (1, 2, 3)
DEFAULT_HINT_SECONDS = 3.0

FONT_CANDIDATES = ("DejaVuSans-Bold.ttf", "Arial.ttf", "Helvetica.ttc")
CORNER_PIP = 12
CENTER_PIP = 30
RED_SUITS = ("H", "D")

THEME = {
    "bg_base": "#1b4332",
    "hud_text": "#f1f5f9",
    "deck_outline": "#a7f3d0",
    "slot_outline": "#99f6e4",
    "card_front": "#f7e8bc",
    "card_back": "#334155",
    "card_border": "#0f172a",
    "card_select": "#fde047",
    "card_hint": "#4ade80",
    "suit_red": "#dc2626",
    "suit_black": "#111827",
}
