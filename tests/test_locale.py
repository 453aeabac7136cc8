import unittest

from game.locale import color_name, get_string, resolve_locale


class TestLocale(unittest.TestCase):
    def test_resolve_locale(self):
        self.assertEqual(resolve_locale("fr"), "fr")
        self.assertEqual(resolve_locale("FR-fr"), "fr")
        self.assertEqual(resolve_locale("en"), "en")
        self.assertEqual(resolve_locale("de"), "en")
        self.assertEqual(resolve_locale(None), "en")

    def test_color_names(self):
        self.assertEqual(color_name("purple"), "Purple")
        self.assertEqual(color_name("purple", "fr"), "Violet")
        # unknown locale falls back to English
        self.assertEqual(color_name("brown", "de"), "Brown")

    def test_get_string_formats(self):
        self.assertEqual(get_string("Attempt", "en", 2, 10), "Attempt 2/10")
        self.assertEqual(get_string("Attempt", "fr", 2, 10), "Tentative 2/10")
        self.assertEqual(get_string("Feedback", "xx", 1, 2),
                         "Well placed: 1, misplaced: 2")

    def test_unknown_key(self):
        with self.assertRaises(KeyError):
            get_string("NoSuchKey")


if __name__ == '__main__':
    unittest.main()
