from functools import lru_cache

from PIL import ImageDraw, ImageFont

from acesup_ui.ui_config import CENTER_PIP, CORNER_PIP, FONT_CANDIDATES, RED_SUITS, THEME


@lru_cache(maxsize=None)
def get_font(size):
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def pip_box(cx, cy, size):
    """Square box of side ``size`` centred on (cx, cy)."""
    half = size / 2
    return cx - half, cy - half, cx + half, cy + half


def paint_heart(draw, box, fill):
    x0, y0, x1, y1 = box
    w = x1 - x0
    mid = x0 + w / 2
    lobe = w / 2
    draw.ellipse((x0, y0, mid + 1, y0 + lobe), fill=fill)
    draw.ellipse((mid - 1, y0, x1, y0 + lobe), fill=fill)
    draw.polygon([(x0, y0 + lobe * 0.6), (x1, y0 + lobe * 0.6), (mid, y1)], fill=fill)


def paint_diamond(draw, box, fill):
    x0, y0, x1, y1 = box
    mid_x, mid_y = (x0 + x1) / 2, (y0 + y1) / 2
    inset = (x1 - x0) * 0.15
    draw.polygon([(mid_x, y0), (x1 - inset, mid_y), (mid_x, y1), (x0 + inset, mid_y)], fill=fill)


def paint_club(draw, box, fill):
    x0, y0, x1, y1 = box
    w = x1 - x0
    mid = x0 + w / 2
    leaf = w * 0.45
    draw.ellipse((mid - leaf / 2, y0, mid + leaf / 2, y0 + leaf), fill=fill)
    draw.ellipse((x0, y0 + leaf * 0.8, x0 + leaf, y0 + leaf * 1.8), fill=fill)
    draw.ellipse((x1 - leaf, y0 + leaf * 0.8, x1, y0 + leaf * 1.8), fill=fill)
    draw.polygon([(mid, y0 + leaf), (mid + w * 0.15, y1), (mid - w * 0.15, y1)], fill=fill)


def paint_spade(draw, box, fill):
    x0, y0, x1, y1 = box
    w = x1 - x0
    mid = x0 + w / 2
    lobe = w / 2
    body = y1 - w * 0.25
    # point up, two lobes below it, then a flared stem
    draw.polygon([(mid, y0), (x1, body - lobe * 0.4), (x0, body - lobe * 0.4)], fill=fill)
    draw.ellipse((x0, body - lobe, mid + 1, body), fill=fill)
    draw.ellipse((mid - 1, body - lobe, x1, body), fill=fill)
    draw.polygon([(mid, body - lobe / 2), (mid + w * 0.15, y1), (mid - w * 0.15, y1)], fill=fill)


SUIT_PAINTERS = {"H": paint_heart, "D": paint_diamond, "C": paint_club, "S": paint_spade}


class CardFaceRenderer:
    def __init__(self, scale=1):
        self.scale = scale
        self.rank_font = get_font(14 * scale)

    def suit_color(self, suit):
        return THEME["suit_red"] if suit in RED_SUITS else THEME["suit_black"]

    def draw_card(self, draw: ImageDraw.ImageDraw, x, y, cw, ch, card, selected=False, hinted=False):
        s = self.scale
        if not card.face_up:
            self.draw_card_back(draw, x, y, cw, ch)
            return
        outline = THEME["card_border"]
        width = s
        if hinted:
            outline = THEME["card_hint"]
            width = 3 * s
        if selected:
            outline = THEME["card_select"]
            width = 3 * s
        draw.rounded_rectangle((x, y, x + cw, y + ch), radius=6 * s, fill=THEME["card_front"], outline=outline, width=width)

        color = self.suit_color(card.suit)
        draw.text((x + 6 * s, y + 4 * s), card.rank, fill=color, font=self.rank_font)
        self.draw_pip(draw, card.suit, x + cw - 14 * s, y + 13 * s, CORNER_PIP * s, color)
        self.draw_pip(draw, card.suit, x + cw // 2, y + ch // 2 + 4 * s, CENTER_PIP * s, color)

    def draw_pip(self, draw, suit, cx, cy, size, fill):
        SUIT_PAINTERS[suit](draw, pip_box(cx, cy, size), fill)

    def draw_card_back(self, draw, x, y, cw, ch):
        s = self.scale
        draw.rounded_rectangle((x, y, x + cw, y + ch), radius=6 * s, fill=THEME["card_back"], outline=THEME["card_border"], width=s)
        for i in range(4):
            yy = y + 12 * s + i * (ch - 24 * s) // 3
            draw.line((x + 10 * s, yy, x + cw - 10 * s, yy), fill=THEME["deck_outline"], width=s)

    def draw_slot(self, draw, x, y, cw, ch, hinted=False):
        s = self.scale
        outline = THEME["card_hint"] if hinted else THEME["slot_outline"]
        draw.rounded_rectangle((x, y, x + cw, y + ch), radius=6 * s, outline=outline, width=(3 if hinted else 1) * s)
