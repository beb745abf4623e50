from __future__ import annotations

import argparse
import json
import logging
import sys

from acesup.Core import Core, GameConfig
from acesup.Interface import Interface
from acesup.Tableau import STACK_COUNT
from acesup_ui.adapter import CoreAdapter
from acesup_ui.image_view import save_snapshot
from acesup_ui.settings_store import build_config, load_settings

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  new-game [seed]   start a new game
  deal              deal up to four cards from the deck
  remove <stack>    discard the top card of a stack
  move <from> <to>  move a top card onto an empty stack
  click <stack>     select / remove / drop like a mouse click
  undo | redo       step through the history
  hint              highlight one legal action
  state             print the snapshot as JSON
  show              print the table
  render <png>      save the table as an image
  quit"""


class CommandError(Exception):
    """Malformed command line input."""
    pass


class CommandLineInterface(Interface):

    def __init__(self, out=None, autoShow=True):
        super().__init__()
        self.out = out if out is not None else sys.stdout
        self.autoShow = autoShow

    def write(self, text=""):
        print(text, file=self.out)

    def printAll(self):
        core = self.core
        self.write(
            f"Deck: {core.deck.size()}    Discarded: {len(core.discards)}    "
            f"Moves: {core.moveCount}    Status: {core.status}"
        )
        self.write("---0----1----2----3---")
        i = 0
        while True:
            has = False
            line = ""
            for stack in core.tableau.stacks:
                if len(stack) <= i:
                    line += "     "
                    continue
                has = True
                line += stack[i].gameStr().rjust(3) + "  "
            if not has:
                break
            self.write(line.rstrip())
            i += 1
        if core.selection is not None:
            (card, stackIdx) = core.selection
            self.write(f"Selected: {card} on stack {stackIdx}")
        if core.hint is not None:
            self.write(f"Hint: {core.hint.to_notation()}")
        self.write()

    def onStart(self):
        self.write("Game started!")
        super().onStart()

    def onEvent(self, event):
        view = CoreAdapter.event_to_view(event)
        self.write(f"{view.type} {json.dumps(view.payload)}")
        super().onEvent(event)

    def onUndoEvent(self, event):
        view = CoreAdapter.event_to_view(event)
        self.write(f"UNDO {view.type} {json.dumps(view.payload)}")
        super().onUndoEvent(event)

    def notifyRedraw(self):
        if self.autoShow:
            self.printAll()

    def onWin(self):
        self.write("You win!")

    def onLoss(self):
        self.write("No moves left, you lose.")


def parse_stack(text: str) -> int:
    try:
        idx = int(text)
    except ValueError:
        raise CommandError(f"not a stack index: {text!r}") from None
    if idx < 0 or idx >= STACK_COUNT:
        raise CommandError(f"stack index out of range: {idx}")
    return idx


def _expect_args(parts, count, usage):
    if len(parts) - 1 != count:
        raise CommandError(f"usage: {usage}")


def run_command(core: Core, ui: CommandLineInterface, line: str, scale=1) -> bool:
    """
    Runs one command. Returns False when the session should end. Raises
    CommandError for malformed input; rule rejections only print a message.
    """
    parts = line.split()
    command = parts[0].lower()
    if command == "new-game":
        if len(parts) > 2:
            raise CommandError("usage: new-game [seed]")
        config = core.config
        if len(parts) == 2:
            try:
                seed = int(parts[1])
            except ValueError:
                raise CommandError(f"not a seed: {parts[1]!r}") from None
            config = GameConfig(seed=seed, hintSeconds=core.config.hintSeconds)
        core.newGame(config)
    elif command == "deal":
        _expect_args(parts, 0, "deal")
        if not core.deal():
            ui.write("Cannot deal!")
    elif command == "remove":
        _expect_args(parts, 1, "remove <stack>")
        if not core.attemptRemove(parse_stack(parts[1])):
            ui.write("Cannot remove!")
    elif command == "move":
        _expect_args(parts, 2, "move <from> <to>")
        if not core.attemptMove(parse_stack(parts[1]), parse_stack(parts[2])):
            ui.write("Cannot move!")
    elif command == "click":
        _expect_args(parts, 1, "click <stack>")
        idx = parse_stack(parts[1])
        if core.tableau.isEmpty(idx):
            ok = core.onEmptyStackActivated(idx)
        else:
            ok = core.onCardActivated(idx)
        if not ok:
            ui.write("Nothing happened.")
    elif command == "undo":
        _expect_args(parts, 0, "undo")
        if not core.undo():
            ui.write("Cannot undo!")
    elif command == "redo":
        _expect_args(parts, 0, "redo")
        if not core.redo():
            ui.write("Cannot redo!")
    elif command == "hint":
        _expect_args(parts, 0, "hint")
        if core.showHint() is None:
            ui.write("No hint available.")
    elif command == "state":
        _expect_args(parts, 0, "state")
        ui.write(json.dumps(CoreAdapter.snapshot(core).to_dict(), ensure_ascii=False, indent=2))
    elif command == "show":
        _expect_args(parts, 0, "show")
        ui.printAll()
    elif command == "render":
        _expect_args(parts, 1, "render <png-path>")
        try:
            path = save_snapshot(CoreAdapter.snapshot(core), parts[1], scale)
        except OSError as e:
            logger.warning("Could not save %s: %s", parts[1], e)
            ui.write(f"Cannot save image: {e}")
        else:
            ui.write(f"Saved {path}")
    elif command == "help":
        ui.write(HELP_TEXT)
    elif command in ("quit", "exit"):
        return False
    else:
        raise CommandError(f"unknown command: {command!r}")
    return True


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Aces Up in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed (overrides the settings file).")
    parser.add_argument("--hint-seconds", type=float, default=None, help="How long a hint stays highlighted.")
    parser.add_argument("--settings", type=str, default=None, help="Path to a settings ini file.")
    parser.add_argument("--quiet", action="store_true", help="Do not print the table after every change.")
    parser.add_argument("--verbose", action="store_true", help="Log engine activity.")
    parser.add_argument("commands", nargs="*", help="Commands to run instead of reading stdin, e.g. 'move 0 3'.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings)
    if args.seed is not None:
        settings["seed"] = str(args.seed)
    if args.hint_seconds is not None:
        settings["hint_seconds"] = str(args.hint_seconds)
    config = build_config(settings)
    scale = int(settings["card_scale"])

    ui = CommandLineInterface(autoShow=not args.quiet)
    core = Core()
    core.registerInterface(ui)
    core.newGame(config)

    lines = args.commands if args.commands else sys.stdin
    for line in lines:
        core.pollTimers()
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            if not run_command(core, ui, line, scale):
                break
        except CommandError as e:
            print(f"Invalid command: {e}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
