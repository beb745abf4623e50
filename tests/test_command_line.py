import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from acesup.Card import parseCards
from acesup.Core import Core
from acesup_ui.command_line import CommandError, CommandLineInterface, main, run_command


class CommandLineTestCase(unittest.TestCase):
    def make_session(self, stacks=("5C 9H", "", "3D", "KH"), deck="2S"):
        out = io.StringIO()
        ui = CommandLineInterface(out=out, autoShow=False)
        core = Core()
        core.registerInterface(ui)
        core.loadPosition([parseCards(s) for s in stacks], parseCards(deck, faceUp=False))
        out.seek(0)
        out.truncate(0)
        return core, ui, out

    def test_commands_drive_the_core(self):
        core, ui, out = self.make_session()
        self.assertTrue(run_command(core, ui, "move 0 1"))
        self.assertEqual("9H", str(core.tableau.peekTop(1)))
        self.assertIn('MOVE {"card": "9H", "src": 0, "dest": 1}', out.getvalue())
        self.assertTrue(run_command(core, ui, "remove 1"))
        self.assertTrue(core.tableau.isEmpty(1))
        self.assertTrue(run_command(core, ui, "undo"))
        self.assertTrue(run_command(core, ui, "redo"))
        self.assertEqual(2, core.moveCount)
        self.assertFalse(run_command(core, ui, "quit"))

    def test_rejections_print_a_message(self):
        core, ui, out = self.make_session(stacks=("5C 9H", "2D", "3D", "KS"))
        run_command(core, ui, "remove 0")
        run_command(core, ui, "move 2 3")
        run_command(core, ui, "redo")
        text = out.getvalue()
        self.assertIn("Cannot remove!", text)
        self.assertIn("Cannot move!", text)
        self.assertIn("Cannot redo!", text)

    def test_click_selects_and_drops(self):
        core, ui, _ = self.make_session(stacks=("5C 9H", "", "3D", "KS"))
        run_command(core, ui, "click 0")
        self.assertEqual(0, core.selection[1])
        run_command(core, ui, "click 1")
        self.assertEqual("9H", str(core.tableau.peekTop(1)))
        self.assertIsNone(core.selection)

    def test_malformed_input_raises(self):
        core, ui, _ = self.make_session()
        for line in ("remove 4", "remove x", "move 1", "fly", "deal 2", "new-game x"):
            with self.assertRaises(CommandError):
                run_command(core, ui, line)

    def test_state_prints_json(self):
        core, ui, out = self.make_session()
        run_command(core, ui, "state")
        data = json.loads(out.getvalue())
        self.assertEqual(1, data["deck_count"])
        self.assertEqual("playing", data["status"])

    def test_show_prints_table(self):
        core, ui, out = self.make_session()
        run_command(core, ui, "hint")
        run_command(core, ui, "show")
        text = out.getvalue()
        self.assertIn("---0----1----2----3---", text)
        self.assertIn("Hint: REMOVE(S0)", text)


class MainTestCase(unittest.TestCase):
    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with tempfile.TemporaryDirectory() as td, redirect_stdout(out), redirect_stderr(err):
            settings = str(Path(td) / "settings.ini")
            code = main(["--settings", settings, "--quiet", *argv])
        return code, out.getvalue(), err.getvalue()

    def test_legal_and_rejected_commands_exit_zero(self):
        code, out, _ = self.run_main(["--seed", "5", "deal", "undo", "undo", "state"])
        self.assertEqual(0, code)
        self.assertIn("Cannot undo!", out)
        self.assertIn('"move_count": 0', out)

    def test_malformed_command_exits_non_zero(self):
        code, _, err = self.run_main(["--seed", "5", "remove 9"])
        self.assertEqual(2, code)
        self.assertIn("out of range", err)

    def test_render_writes_png(self):
        with tempfile.TemporaryDirectory() as td:
            png = Path(td) / "table.png"
            code, out, _ = self.run_main(["--seed", "3", "deal", f"render {png}"])
            self.assertEqual(0, code)
            self.assertTrue(png.exists())
            self.assertEqual(b"\x89PNG", png.read_bytes()[:4])

    def test_render_to_unwritable_path_is_rejected(self):
        with tempfile.TemporaryDirectory() as td:
            blocker = Path(td) / "not-a-dir"
            blocker.write_text("x")
            code, out, _ = self.run_main(["--seed", "3", f"render {blocker / 'table.png'}", "state"])
            self.assertEqual(0, code)
            self.assertIn("Cannot save image:", out)
            self.assertIn('"move_count": 0', out)


if __name__ == "__main__":
    unittest.main()
