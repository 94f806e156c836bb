import unittest
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from search.tokenizer import tokenize


class TestTokenizer(unittest.TestCase):

    def test_splits_number_with_letter_suffix(self):
        self.assertEqual(tokenize("47a"), ["47", "a"])
        self.assertEqual(tokenize("Flat 12B"), ["12", "b", "flat"])

    def test_does_not_split_other_alphanumerics(self):
        self.assertEqual(tokenize("a47"), ["a47"])
        self.assertEqual(tokenize("47a1"), ["47a1"])

    def test_punctuation_insensitive(self):
        self.assertEqual(tokenize("Flat 25"), tokenize("Flat, 25!"))
        self.assertEqual(tokenize("Flat 25"), ["25", "flat"])

    def test_punctuation_is_removed_before_splitting(self):
        """'47-a' becomes '47a' and is then split"""
        self.assertEqual(tokenize("47-a"), ["47", "a"])

    def test_lowercases_and_sorts(self):
        self.assertEqual(tokenize("Rose Tower 62 Clarence Parade"),
                         ["62", "clarence", "parade", "rose", "tower"])

    def test_sort_is_plain_string_order(self):
        self.assertEqual(tokenize("Zeta alpha 9 10"), ["10", "9", "alpha", "zeta"])

    def test_keeps_duplicates(self):
        self.assertEqual(tokenize("12 High Street 12"), ["12", "12", "high", "street"])

    def test_extra_spaces_are_discarded(self):
        self.assertEqual(tokenize("  Rose    Tower "), ["rose", "tower"])

    def test_non_space_whitespace_is_stripped(self):
        self.assertEqual(tokenize("Rose\tTower"), ["rosetower"])

    def test_non_ascii_letters_are_stripped(self):
        self.assertEqual(tokenize("Café Royal"), ["caf", "royal"])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(None), [])

    def test_punctuation_only_input(self):
        self.assertEqual(tokenize(",.!-/"), [])

    def test_idempotent_on_own_output(self):
        samples = ["Flat 47a, Rose Tower", "62 Clarence Parade", "12 12 b", "", "Apt. 3C/4"]
        for text in samples:
            tokens = tokenize(text)
            self.assertEqual(tokenize(" ".join(tokens)), tokens, text)


if __name__ == '__main__':
    unittest.main()
