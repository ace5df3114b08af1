# -*- coding: utf-8 -*-
"""tests for the regular expressions of addresses and the s command"""
import unittest

from pysed.sederrors import InvalidRegex
from pysed.sedregexp import SedRegexp, Occurrence


class OccurrenceTests(unittest.TestCase):
    """tests for the match selector of the s command"""

    def test_global(self):
        occurrence = Occurrence.all()
        self.assertTrue(occurrence.globally)
        self.assertIsNone(occurrence.nth)
        self.assertEqual(str(occurrence), 'g')

    def test_nth(self):
        occurrence = Occurrence(3)
        self.assertFalse(occurrence.globally)
        self.assertEqual(occurrence.nth, 3)
        self.assertEqual(str(occurrence), '3')

    def test_equality(self):
        self.assertEqual(Occurrence(), Occurrence(1))
        self.assertEqual(Occurrence.all(), Occurrence(globally=True))
        self.assertNotEqual(Occurrence(1), Occurrence(2))
        self.assertNotEqual(Occurrence(1), Occurrence.all())


class SedRegexpTests(unittest.TestCase):
    """tests for SedRegexp"""

    def test_matches(self):
        regexp = SedRegexp('o+')
        self.assertTrue(regexp.matches('good'))
        self.assertFalse(regexp.matches('bad'))

    def test_invalid(self):
        with self.assertRaises(InvalidRegex) as cm:
            SedRegexp('(', 2, 's/(/x/')
        self.assertTrue(cm.exception.message.startswith('pysed error: script line 2 (s/(/x/): '))

    def test_global_replace(self):
        self.assertEqual(SedRegexp('o').subn('0', 'good', Occurrence.all()), 'g00d')

    def test_first_replace(self):
        self.assertEqual(SedRegexp('o').subn('0', 'good', Occurrence(1)), 'g0od')

    def test_second_replace(self):
        self.assertEqual(SedRegexp('o').subn('0', 'good', Occurrence(2)), 'go0d')

    def test_nth_beyond_matches(self):
        regexp = SedRegexp('o')
        for nth in (3, 4, 10):
            self.assertEqual(regexp.subn('0', 'good', Occurrence(nth)), 'good')
        self.assertEqual(SedRegexp('x').subn('y', 'good', Occurrence(1)), 'good')

    def test_nth_counts_overlapping_matches(self):
        regexp = SedRegexp('aa')
        self.assertEqual(regexp.subn('X', 'aaaa', Occurrence(1)), 'Xaa')
        self.assertEqual(regexp.subn('X', 'aaaa', Occurrence(2)), 'aXa')
        self.assertEqual(regexp.subn('X', 'aaaa', Occurrence(3)), 'aaX')
        self.assertEqual(regexp.subn('X', 'aaaa', Occurrence(4)), 'aaaa')

    def test_global_is_idempotent(self):
        regexp = SedRegexp('o')
        once = regexp.subn('0', 'good food', Occurrence.all())
        self.assertEqual(once, 'g00d f00d')
        self.assertEqual(regexp.subn('0', once, Occurrence.all()), once)

    def test_global_empty_matches(self):
        self.assertEqual(SedRegexp('x*').subn('-', 'abc', Occurrence.all()), '-a-b-c-')
        # no empty match directly behind a non empty one
        self.assertEqual(SedRegexp('b*').subn('-', 'abc', Occurrence.all()), '-a-c-')

    def test_replacement_is_literal(self):
        self.assertEqual(SedRegexp('o').subn('&', 'good', Occurrence(1)), 'g&od')
        self.assertEqual(SedRegexp('(o)').subn('\\1', 'good', Occurrence.all()), 'g\\1\\1d')

    def test_posix_classes(self):
        regexp = SedRegexp('[[:digit:]]')
        self.assertTrue(regexp.matches('a1'))
        self.assertFalse(regexp.matches('ab'))
        self.assertEqual(regexp.subn('X', 'a1b2', Occurrence.all()), 'aXbX')
        self.assertEqual(SedRegexp('[[:alpha:]]+').subn('-', '12ab34', Occurrence(1)),
                         '12-34')

    def test_leftmost_longest(self):
        self.assertEqual(SedRegexp('a|ab').subn('X', 'abc', Occurrence(1)), 'Xc')
        self.assertEqual(SedRegexp('(a|ab)(c|bcd)').subn('X', 'abcd', Occurrence.all()), 'X')

    def test_str(self):
        self.assertEqual(str(SedRegexp('a.c')), '/a.c/')
