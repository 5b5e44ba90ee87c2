import unittest
from pathlib import Path
from unittest import mock

from click.testing import CliRunner

from shrunk import config
from shrunk.cli import main
from shrunk.core.errors import WorldLoadError


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_look_and_quit(self):
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(main, input="look\nquit\n")
            saves = list(Path(".").glob(f"{config.SAVE_PREFIX}*.json"))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Everything is so big!", result.output)
        self.assertIn("Some of the things that you see include:", result.output)
        self.assertIn("shrink ray", result.output)
        self.assertIn("Goodbye!", result.output)
        self.assertEqual(len(saves), 1)

    def test_unknown_command_and_end_of_input(self):
        result = self.runner.invoke(main, input="\nfly away\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Not a valid command: fly away", result.output)
        self.assertIn("Goodbye!", result.output)

    def test_giving_up_ends_the_game(self):
        result = self.runner.invoke(main, input="call\ny\nlook\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("grounded forever", result.output)
        self.assertIn("GAME OVER", result.output)
        self.assertNotIn("Goodbye!", result.output)

    def test_bad_rooms_abort(self):
        with mock.patch("shrunk.cli.new_world", side_effect=WorldLoadError("The game must have at least 15 rooms")):
            result = self.runner.invoke(main)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("at least 15 rooms", result.output)


if __name__ == "__main__":
    unittest.main()
