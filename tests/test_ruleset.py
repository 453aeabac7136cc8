import unittest

from game.errors import InvalidConfiguration
from game.ruleset import DEFAULT_RULES, make_rules


class TestRules(unittest.TestCase):
    def test_defaults(self):
        rules = make_rules()
        self.assertEqual(rules["code_length"], 4)
        self.assertEqual(rules["max_attempts"], 10)
        self.assertEqual(rules["locale"], "en")
        self.assertEqual(len(rules["colors"]), 10)

    def test_overrides_do_not_touch_defaults(self):
        rules = make_rules(code_length=10, max_attempts=100, locale="fr")
        self.assertEqual(rules["code_length"], 10)
        self.assertEqual(rules["max_attempts"], 100)
        self.assertEqual(rules["locale"], "fr")
        self.assertEqual(DEFAULT_RULES["code_length"], 4)
        self.assertEqual(DEFAULT_RULES["locale"], "en")

    def test_bounds(self):
        for length in (3, 11):
            with self.assertRaises(InvalidConfiguration):
                make_rules(code_length=length)
        for attempts in (9, 101):
            with self.assertRaises(InvalidConfiguration):
                make_rules(max_attempts=attempts)


if __name__ == '__main__':
    unittest.main()
