from pathlib import Path

from PIL import Image, ImageDraw

from acesup.Interface import Interface
from acesup.Rules import DEAL, MOVE, REMOVE
from acesup_ui.adapter import CoreAdapter
from acesup_ui.card_face import CardFaceRenderer, get_font
from acesup_ui.ui_config import CARD_HEIGHT, CARD_WIDTH, MARGIN, STACK_GAP, STATUS_HEIGHT, THEME, VISIBLE_STEP
from acesup_ui.view_model import GameViewModel

STACK_COUNT = 4
# one initial card plus twelve deals
MAX_VISIBLE_CARDS = 13


def image_size(scale=1):
    width = 2 * MARGIN + (STACK_COUNT + 1) * CARD_WIDTH + STACK_COUNT * STACK_GAP
    height = 2 * MARGIN + STATUS_HEIGHT + CARD_HEIGHT + (MAX_VISIBLE_CARDS - 1) * VISIBLE_STEP
    return width * scale, height * scale


def stack_origin(stack_idx, scale=1):
    x = MARGIN + (stack_idx + 1) * (CARD_WIDTH + STACK_GAP)
    return x * scale, (MARGIN + STATUS_HEIGHT) * scale


def render_snapshot(vm: GameViewModel, scale=1) -> Image.Image:
    """Draws the deck, the four stacks and a status line."""
    renderer = CardFaceRenderer(scale)
    img = Image.new("RGB", image_size(scale), THEME["bg_base"])
    draw = ImageDraw.Draw(img)
    cw, ch, step = CARD_WIDTH * scale, CARD_HEIGHT * scale, VISIBLE_STEP * scale

    hint = vm.hint
    deck_x, deck_y = MARGIN * scale, (MARGIN + STATUS_HEIGHT) * scale
    deck_hinted = hint is not None and hint.kind == DEAL
    if vm.deck_count > 0:
        renderer.draw_card_back(draw, deck_x, deck_y, cw, ch)
        if deck_hinted:
            renderer.draw_slot(draw, deck_x, deck_y, cw, ch, hinted=True)
    else:
        renderer.draw_slot(draw, deck_x, deck_y, cw, ch)

    for stack_idx, stack in enumerate(vm.stacks):
        x, y = stack_origin(stack_idx, scale)
        cards = stack.cards
        if not cards:
            hinted = hint is not None and hint.kind == MOVE and hint.to_stack == stack_idx
            renderer.draw_slot(draw, x, y, cw, ch, hinted=hinted)
            continue
        for card_idx, card in enumerate(cards):
            is_top = card_idx == len(cards) - 1
            selected = is_top and vm.selection is not None and vm.selection.stack == stack_idx
            hinted = is_top and hint is not None and hint.kind in (REMOVE, MOVE) and hint.stack == stack_idx
            renderer.draw_card(draw, x, y + card_idx * step, cw, ch, card, selected=selected, hinted=hinted)

    status = f"{vm.status.upper()}  moves: {vm.move_count}  deck: {vm.deck_count}  time: {int(vm.elapsed_sec)}s"
    draw.text((MARGIN * scale, MARGIN * scale // 2), status, fill=THEME["hud_text"], font=get_font(14 * scale))
    return img


def save_snapshot(vm: GameViewModel, path, scale=1) -> Path:
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    render_snapshot(vm, scale).save(path, format="PNG")
    return path


class ImageInterface(Interface):
    """Keeps the latest snapshot so it can be rendered on request."""

    def __init__(self, scale=1):
        super().__init__()
        self.scale = scale
        self.vm = None

    def notifyRedraw(self):
        self.vm = CoreAdapter.snapshot(self.core)

    def render(self) -> Image.Image:
        if self.vm is None:
            self.notifyRedraw()
        return render_snapshot(self.vm, self.scale)

    def save(self, path) -> Path:
        if self.vm is None:
            self.notifyRedraw()
        return save_snapshot(self.vm, path, self.scale)
