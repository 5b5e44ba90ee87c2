import unittest

from shrunk.core.command import VERB_SYNONYMS, Verb
from shrunk.core.command_parser import normalize_command, parse, raw_argument, title_case

from worlds import make_world


class TestNormalize(unittest.TestCase):
    def test_lower_cases_and_splits(self):
        self.assertEqual(normalize_command("  Look   AT  the Cupboard "), ["look", "at", "the", "cupboard"])

    def test_blank(self):
        self.assertEqual(normalize_command("   "), [])

    def test_title_case(self):
        self.assertEqual(title_case("upstairs   hallway"), "Upstairs Hallway")
        self.assertEqual(title_case("DINING ROOM"), "Dining Room")


class TestParse(unittest.TestCase):
    def setUp(self):
        self.world = make_world()

    def test_empty_input_is_a_no_op(self):
        result = parse(self.world, "")
        self.assertTrue(result.empty)
        self.assertTrue(parse(self.world, "   \t").empty)

    def test_bare_room_name_means_go(self):
        result = parse(self.world, "  hALL ")
        self.assertEqual(result.command.verb, Verb.GO)
        self.assertEqual(result.command.argument, "Hall")

    def test_bare_name_of_unknown_room_is_invalid(self):
        result = parse(self.world, "kitchen")
        self.assertIsNone(result.command)
        self.assertEqual(result.error_msg, "Not a valid command: kitchen")

    def test_synonyms_share_a_verb(self):
        for word in ("take", "grab", "pull", "yank"):
            self.assertEqual(parse(self.world, f"{word} pebble").command.verb, Verb.TAKE)
        self.assertEqual(parse(self.world, "mystuff").command.verb, Verb.INVENTORY)
        self.assertEqual(parse(self.world, "quit").command.verb, Verb.EXIT)

    def test_every_verb_is_its_own_synonym(self):
        for verb in Verb:
            self.assertIs(VERB_SYNONYMS[verb.value], verb)

    def test_connector_words_are_dropped(self):
        look = parse(self.world, "look at paper   towels").command
        self.assertEqual(look.verb, Verb.LOOK)
        self.assertEqual(look.argument, "paper towels")
        self.assertEqual(look.tokens, ["look", "at", "paper", "towels"])

        go = parse(self.world, "go to dining room").command
        self.assertEqual(go.argument, "dining room")

    def test_verb_without_argument(self):
        command = parse(self.world, "take").command
        self.assertEqual(command.verb, Verb.TAKE)
        self.assertEqual(command.argument, "")

    def test_raw_argument_keeps_case(self):
        command = parse(self.world, "loadgame Saves/Adventure-1.json").command
        self.assertEqual(command.argument, "saves/adventure-1.json")
        self.assertEqual(command.raw_argument, "Saves/Adventure-1.json")

    def test_raw_argument_strips_quotes(self):
        self.assertEqual(raw_argument('loadgame "my save.json"'), "my save.json")
        self.assertEqual(raw_argument("loadgame"), "")

    def test_unknown_verb(self):
        result = parse(self.world, "Dance wildly")
        self.assertEqual(result.error_msg, "Not a valid command: dance wildly")


if __name__ == "__main__":
    unittest.main()
