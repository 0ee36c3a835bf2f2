import unittest

from window_switcher.engine.commands import Command, help_text, parse_command
from window_switcher.engine.errors import UnknownCommand


class ParseCommandTests(unittest.TestCase):
    def test_command_names_are_case_insensitive(self):
        self.assertIs(parse_command("/QUIT/"), Command.QUIT)
        self.assertIs(parse_command("/quit/"), Command.QUIT)
        self.assertIs(parse_command("/Toggle_Dock/"), Command.TOGGLE_DOCK)

    def test_every_command_parses(self):
        for command in Command:
            self.assertIs(parse_command(f"/{command.name.lower()}/"), command)

    def test_unterminated_command_is_plain_filter_text(self):
        self.assertIsNone(parse_command("/quit"))
        self.assertIsNone(parse_command("quit/"))

    def test_command_must_span_the_whole_text(self):
        self.assertIsNone(parse_command("foo/quit/bar"))
        self.assertIsNone(parse_command(" /quit/"))
        self.assertIsNone(parse_command("/quit/\n"))

    def test_empty_or_nested_slashes_do_not_match(self):
        self.assertIsNone(parse_command(""))
        self.assertIsNone(parse_command("//"))
        self.assertIsNone(parse_command("/a/b/"))

    def test_unknown_name_is_reported(self):
        with self.assertRaises(UnknownCommand) as caught:
            parse_command("/frobnicate/")
        self.assertEqual(caught.exception.name, "FROBNICATE")
        self.assertEqual(str(caught.exception), "Unknown command: FROBNICATE")

    def test_help_text_lists_every_command(self):
        text = help_text()
        for command in Command:
            self.assertIn(f"/{command.name.lower()}/", text)


if __name__ == "__main__":
    unittest.main()
