#!/usr/bin/env python
import unittest
from unittest import mock
from textmatch import codepoints
from textmatch.codepoints import ABSENT, CodepointSequence, TextValue
from textmatch.matching import (
    TM_CASEFOLD, CodepointEqualityEvaluator, CodepointMatcher, contains_code_point, ends_with, starts_with
)


def surrogate_pair(cp):
    cp -= 0x10000
    return chr(0xD800 + (cp >> 10)) + chr(0xDC00 + (cp & 0x3FF))


def tv(text):
    return ABSENT if text is None else TextValue(text)


class EqualityEvaluatorTest(unittest.TestCase):
    def evaluate(self, left, right, flags=0):
        return CodepointEqualityEvaluator(CodepointSequence(left), CodepointSequence(right)).compare(flags)

    def test_exact(self):
        self.assertTrue(self.evaluate("test", "test"))
        self.assertTrue(self.evaluate("", ""))
        self.assertFalse(self.evaluate("test", "TEST"))
        self.assertFalse(self.evaluate("test", "tes"))

    def test_casefold(self):
        self.assertTrue(self.evaluate("test", "TEST", TM_CASEFOLD))
        self.assertTrue(self.evaluate("café", "CAFÉ", TM_CASEFOLD))
        self.assertFalse(self.evaluate("test", "TESTS", TM_CASEFOLD))

    def test_no_length_changing_fold(self):
        # Whole-string casefold would make these equal; per code point it does not.
        self.assertFalse(self.evaluate("straße", "STRASSE", TM_CASEFOLD))
        self.assertTrue(self.evaluate("STRAẞE", "straße", TM_CASEFOLD))

    def test_identity_fast_path(self):
        seq = CodepointSequence("value")
        evaluator = CodepointEqualityEvaluator(seq, seq)
        self.assertTrue(evaluator.equals())
        self.assertTrue(evaluator.equals_ignore_case())

    def test_surrogate_pair_equals_code_point(self):
        self.assertTrue(self.evaluate("a" + surrogate_pair(0x1F600), "a\U0001F600"))
        # One supplementary character is not two characters.
        self.assertFalse(self.evaluate("\U0001F600", "ab"))


class CodepointMatcherTest(unittest.TestCase):
    def contains(self, subject, pattern, flags=0):
        return CodepointMatcher(tv(subject), tv(pattern)).contains(flags)

    def test_absence_policy(self):
        for flags in (0, TM_CASEFOLD):
            with self.subTest(flags=flags):
                self.assertFalse(self.contains(None, None, flags))
                self.assertFalse(self.contains(None, "", flags))
                self.assertFalse(self.contains(None, "es", flags))
                self.assertFalse(self.contains("test", None, flags))
                self.assertTrue(self.contains("test", "", flags))
                self.assertTrue(self.contains("", "", flags))

    def test_search(self):
        self.assertTrue(self.contains("test", "es"))
        self.assertTrue(self.contains("test", "te"))
        self.assertTrue(self.contains("test", "st"))
        self.assertTrue(self.contains("test", "test"))
        self.assertFalse(self.contains("test", "tests"))
        self.assertFalse(self.contains("test", "ts"))
        self.assertFalse(self.contains("", "a"))
        # Overlapping candidates: the window must slide one code point at a time.
        self.assertTrue(self.contains("aaab", "aab"))
        self.assertTrue(self.contains("abababc", "ababc"))

    def test_search_ignore_case(self):
        matcher = CodepointMatcher(TextValue("TEST"), TextValue("es"))
        self.assertTrue(matcher.contains_search_sequence_ignore_case())
        self.assertFalse(matcher.contains_search_sequence())
        self.assertTrue(self.contains("Grüße aus KÖLN", "köln", TM_CASEFOLD))

    def test_supplementary_characters_are_atomic(self):
        pair = surrogate_pair(0x1F600)
        self.assertTrue(self.contains("x" + pair + "y", "\U0001F600y"))
        self.assertTrue(self.contains("x\U0001F600y", pair))
        # Half of a pair is not a character of the subject.
        self.assertFalse(self.contains("x" + pair + "y", "\ud83d"))
        self.assertFalse(self.contains("x" + pair + "y", "\ude00y"))
        self.assertTrue(self.contains("x\ud83dy", "\ud83d"))


class ContainsCodePointTest(unittest.TestCase):
    def test_policy(self):
        self.assertFalse(contains_code_point(ABSENT, ord("e")))
        self.assertFalse(contains_code_point(ABSENT, 0))
        self.assertFalse(contains_code_point(TextValue("test"), 0))
        self.assertTrue(contains_code_point(TextValue("test"), ord("e")))
        self.assertFalse(contains_code_point(TextValue("test"), ord("E")))
        self.assertFalse(contains_code_point(TextValue(""), ord("e")))

    def test_string_argument(self):
        self.assertTrue(contains_code_point(TextValue("test"), "s"))
        self.assertTrue(contains_code_point(TextValue("a" + surrogate_pair(0x1F600)), "\U0001F600"))
        self.assertTrue(contains_code_point(TextValue("a\U0001F600"), surrogate_pair(0x1F600)))
        with self.assertRaises(ValueError):
            contains_code_point(TextValue("test"), "es")
        with self.assertRaises(ValueError):
            contains_code_point(TextValue("test"), "")

    def test_supplementary(self):
        subject = TextValue("a" + surrogate_pair(0x1F600))
        self.assertTrue(contains_code_point(subject, 0x1F600))
        self.assertFalse(contains_code_point(subject, 0xD83D))

    def test_out_of_range_is_logged(self):
        with self.assertLogs(level="WARNING"):
            self.assertFalse(contains_code_point(TextValue("test"), 0x110000))
        with self.assertLogs(level="WARNING"):
            self.assertFalse(contains_code_point(TextValue("test"), -1))


class AffixTest(unittest.TestCase):
    def test_absence_policy(self):
        for check in (starts_with, ends_with):
            for flags in (0, TM_CASEFOLD):
                with self.subTest(check=check.__name__, flags=flags):
                    self.assertFalse(check(ABSENT, ABSENT, flags))
                    self.assertFalse(check(ABSENT, TextValue(""), flags))
                    self.assertFalse(check(ABSENT, TextValue("t"), flags))
                    self.assertFalse(check(TextValue("test"), ABSENT, flags))
                    self.assertTrue(check(TextValue("test"), TextValue(""), flags))
                    self.assertTrue(check(TextValue(""), TextValue(""), flags))

    def test_starts_with(self):
        self.assertTrue(starts_with(TextValue("test"), TextValue("t")))
        self.assertTrue(starts_with(TextValue("test"), TextValue("test")))
        self.assertFalse(starts_with(TextValue("test"), TextValue("testing")))
        self.assertFalse(starts_with(TextValue("test"), TextValue("es")))
        self.assertFalse(starts_with(TextValue("TEST"), TextValue("t")))
        self.assertTrue(starts_with(TextValue("TEST"), TextValue("t"), TM_CASEFOLD))

    def test_ends_with(self):
        self.assertTrue(ends_with(TextValue("test"), TextValue("st")))
        self.assertFalse(ends_with(TextValue("test"), TextValue("te")))
        self.assertFalse(ends_with(TextValue("st"), TextValue("test")))
        self.assertTrue(ends_with(TextValue("TEST"), TextValue("st"), TM_CASEFOLD))
        self.assertFalse(ends_with(TextValue("TEST"), TextValue("st")))

    def test_supplementary_affixes(self):
        pair = surrogate_pair(0x1F600)
        subject = TextValue(pair + "abc" + pair)
        self.assertTrue(starts_with(subject, TextValue("\U0001F600a")))
        self.assertTrue(ends_with(subject, TextValue("c\U0001F600")))
        # The subject is five code points long, so a five code point pattern fits.
        self.assertTrue(ends_with(subject, TextValue("\U0001F600abc\U0001F600")))
        self.assertFalse(starts_with(subject, TextValue("\ud83d")))
        self.assertFalse(ends_with(subject, TextValue("\ude00")))

    def test_affix_counts_each_operand_once(self):
        # The subject and the pattern are each measured once; head/tail views reuse the bounds.
        subject = TextValue("x" + surrogate_pair(0x1F600) * 50 + "abc")
        for check, pattern in ((starts_with, TextValue("x\U0001F600")), (ends_with, TextValue("bc"))):
            with self.subTest(check=check.__name__):
                with mock.patch.object(codepoints, "count_code_points", wraps=codepoints.count_code_points) as counter:
                    self.assertTrue(check(subject, pattern))
                self.assertEqual(counter.call_count, 2)


if __name__ == "__main__":
    unittest.main()
