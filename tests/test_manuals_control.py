"""
Set of test for the interactive launcher.
"""
from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import MagicMock

import matplotlib

matplotlib.use("Agg")

import manuals_control  # noqa: E402
from tilemerge.envs import GridEngine  # noqa: E402


class TestKeyHandler(TestCase):
    def setUp(self):
        self.engine = GridEngine(seed=0)
        self.engine.load([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.window = MagicMock()

    def test_arrow_key_moves(self):
        manuals_control.key_handler(self.engine, self.window, SimpleNamespace(key="left"))

        self.assertEqual(self.engine.score, 4)
        self.window.show_state.assert_called_once()

    def test_milestone_message_uses_win_value(self):
        engine = GridEngine(win_value=8, seed=0)
        engine.load([[4, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

        with self.assertLogs("manuals_control", level="INFO") as logs:
            manuals_control.key_handler(engine, self.window, SimpleNamespace(key="left"))

        self.assertIn("You reached 8!", logs.output[0])

    def test_unknown_key_is_ignored(self):
        manuals_control.key_handler(self.engine, self.window, SimpleNamespace(key="enter"))

        self.assertEqual(self.engine.score, 0)
        self.window.show_state.assert_not_called()

    def test_backspace_resets(self):
        manuals_control.key_handler(self.engine, self.window, SimpleNamespace(key="left"))
        manuals_control.key_handler(self.engine, self.window, SimpleNamespace(key="backspace"))

        self.assertEqual(self.engine.score, 0)
        self.assertEqual(self.engine.best_score, 4)

    def test_escape_closes(self):
        manuals_control.key_handler(self.engine, self.window, SimpleNamespace(key="escape"))
        self.window.close.assert_called_once()

    def test_parse_arguments(self):
        args = manuals_control.parse_arguments(["--size", "5", "--seed", "3"])
        self.assertEqual(args.size, 5)
        self.assertEqual(args.seed, 3)
        self.assertEqual(args.log_level, "INFO")


if __name__ == "__main__":
    main()
