import os
import tempfile
import unittest
from unittest.mock import patch

from datamodels import WordSet
from word_source import ADJECTIVE, NOUN, WordListError, classify_word, classify_words, load


class TestClassifyWord(unittest.TestCase):
    def test_adjective_suffixes(self):
        self.assertEqual(classify_word("happy"), ADJECTIVE)
        self.assertEqual(classify_word("famous"), ADJECTIVE)

    def test_noun_suffixes(self):
        self.assertEqual(classify_word("teacher"), NOUN)
        self.assertEqual(classify_word("nation"), NOUN)
        self.assertEqual(classify_word("artist"), NOUN)

    def test_length_bounds_are_exclusive(self):
        self.assertIsNone(classify_word("shy"))  # 3 letters
        self.assertEqual(classify_word("holy"), ADJECTIVE)  # 4 letters
        self.assertEqual(classify_word("adventurous"), ADJECTIVE)  # 11 letters
        self.assertIsNone(classify_word("questionnaire"))
        self.assertIsNone(classify_word("hypervigilancy"))  # 14 letters

    def test_other_words_are_discarded(self):
        self.assertIsNone(classify_word("hero"))
        self.assertIsNone(classify_word("table"))
        self.assertIsNone(classify_word(""))


class TestClassifyWords(unittest.TestCase):
    def test_keeps_order_and_lowercases(self):
        words = classify_words(["Happy\n", "teacher\n", "  Nervous  \n", "table\n", "NATION\n", "\n"])
        self.assertIsInstance(words, WordSet)
        self.assertEqual(words.adjectives, ("happy", "nervous"))
        self.assertEqual(words.nouns, ("teacher", "nation"))
        self.assertEqual(len(words), 4)


class TestLoad(unittest.TestCase):
    def setUp(self):
        self.test_output_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_output_dir, "words")

    def tearDown(self):
        if os.path.exists(self.path):
            os.remove(self.path)
        os.rmdir(self.test_output_dir)

    def test_load_word_list(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write("Happy\nhero\nhunter\nhungry\nhistorian\nhumorous\nhypnotist\n")

        words = load(self.path)

        self.assertEqual(words.adjectives, ("happy", "hungry", "humorous"))
        self.assertEqual(words.nouns, ("hunter", "hypnotist"))

    def test_missing_file_raises(self):
        with self.assertRaises(WordListError) as ctx:
            load(self.path)
        self.assertEqual(ctx.exception.path, self.path)
        self.assertIn("wamerican", ctx.exception.hint)

    def test_non_utf8_lines_do_not_reject_the_list(self):
        with open(self.path, 'wb') as f:
            f.write("happy\nhunter\nAngstr\u00f6m\nna\u00efvety\n".encode("latin-1"))

        words = load(self.path)

        self.assertEqual(words.adjectives, ("happy", "na\ufffdvety"))
        self.assertEqual(words.nouns, ("hunter",))

    @patch('word_source.classify_words')
    def test_read_failure_raises(self, mock_classify_words):
        with open(self.path, 'w') as f:
            f.write("happy\nhunter\n")
        mock_classify_words.side_effect = OSError("Input/output error")

        with self.assertRaises(WordListError) as ctx:
            load(self.path)
        self.assertIn("reading", ctx.exception.message)


if __name__ == '__main__':
    unittest.main()
