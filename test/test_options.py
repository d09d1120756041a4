"""
Option registry behavioral tests (names, bounds, duplicates, separator, freezing).

Scope
- Validate Option construction: name syntax, at least one name, arity bounds.
- Validate sub-option builders and keyword name syntax.
- Validate Options: lookups, duplicate rejection, separator rules, build-then-freeze.

Conventions
- Test method names follow CamelCase per project convention.
- Faults are asserted by their taxonomy class; the builtin base is checked once.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from seqparse import (
    Option,
    Options,
    Parser,
    SubOption,
    String,
    Integer,
    INTEGER,
    FaultCode,
    InvalidOptionSpecError,
    InvalidSeparatorError,
    DuplicateOptionError,
    FrozenOptionError,
)


class TestOption(TestCase):
    """Option specification construction."""

    def testValidNamePairs(self):
        for short, long in (("f", "file"), ("f", None), (None, "file"), ("_", "_x"),
                            ("v2", "dry-run"), ("X", "a-b-c"), ("a_b", "x_1-y_2")):
            option = Option(short, long, 0, 0)
            self.assertEqual((option.short, option.long), (short, long))

    def testBothNamesMissingRejected(self):
        with self.assertRaises(InvalidOptionSpecError):
            Option(None, None, 0, 0)

    def testInvalidShortNamesRejected(self):
        for short in ("", "1", "-f", "f-g", "f g", "é", "f\n"):
            with self.assertRaises(InvalidOptionSpecError, msg=repr(short)):
                Option(short, "ok", 0, 0)

    def testInvalidLongNamesRejected(self):
        for long in ("", "1file", "-file", "file-", "a--b", "file name", "ä"):
            with self.assertRaises(InvalidOptionSpecError, msg=repr(long)):
                Option("f", long, 0, 0)

    def testValidBounds(self):
        for minimum, maximum in ((0, 0), (0, 1), (1, 1), (2, 5)):
            option = Option("f", None, minimum, maximum)
            self.assertEqual((option.minimum, option.maximum), (minimum, maximum))

    def testInvalidBoundsRejected(self):
        for minimum, maximum in ((-1, 0), (0, -1), (2, 1), (1.0, 2), (True, 1)):
            with self.assertRaises(InvalidOptionSpecError, msg=repr((minimum, maximum))):
                Option("f", None, minimum, maximum)

    def testInvalidSpecIsValueError(self):
        with self.assertRaises(ValueError):
            Option("1", None, 0, 0)

    def testFaultCarriesCode(self):
        with self.assertRaises(InvalidOptionSpecError) as context:
            Option("f", None, 3, 1)
        self.assertEqual(context.exception.code, FaultCode.INVALID_OPTION_SPEC)
        self.assertEqual(context.exception.option, "f")

    def testNamePrefersLong(self):
        self.assertEqual(Option("f", "file", 0, 0).name, "file")
        self.assertEqual(Option("f", None, 0, 0).name, "f")

    def testFlags(self):
        self.assertEqual(Option("f", "file", 0, 0).flags, ("-f", "--file"))
        self.assertEqual(Option(None, "file", 0, 0).flags, ("--file",))

    def testBuildersChainAndKeepOrder(self):
        first, second = SubOption(INTEGER), SubOption(INTEGER)
        option = Option("p", None, 0, 2).add_sub_option(first).add_sub_option(second)
        self.assertEqual(len(option.sub_options), 2)
        self.assertIs(option.sub_options[0], first)
        self.assertIs(option.sub_options[1], second)

    def testKeywordSubOptions(self):
        option = Option("o", None, 0, 0).add_kw_sub_option("mode", String).add_kw_sub_option("max-size", Integer)
        self.assertIs(option.kw_sub_options["mode"], String)
        self.assertIs(option.kw_sub_options["max-size"], Integer)

    def testInvalidKeywordNameRejected(self):
        option = Option("o", None, 0, 0)
        for key in ("", "1a", "a b", "-a", "a="):
            with self.assertRaises(InvalidOptionSpecError, msg=repr(key)):
                option.add_kw_sub_option(key, String)

    def testSubOptionTypeChecked(self):
        with self.assertRaises(TypeError):
            Option("o", None, 0, 1).add_sub_option(INTEGER)

    def testExposedContainersAreSnapshots(self):
        option = Option("o", None, 0, 1).add_sub_option(String).add_kw_sub_option("k", String)
        self.assertIsInstance(option.sub_options, tuple)
        with self.assertRaises(TypeError):
            option.kw_sub_options["other"] = String
        self.assertNotIn("other", option.kw_sub_options)


class TestOptions(TestCase):
    """Option registry."""

    def testEmptyRegistryLookupsMiss(self):
        options = Options()
        self.assertIsNone(options.get_short("f"))
        self.assertIsNone(options.get_long("file"))
        self.assertEqual(len(options), 0)

    def testAddOptionIndexesBothNames(self):
        options = Options()
        option = options.add_option(Option("f", "file", 1, 1))
        self.assertIs(options.get_short("f"), option)
        self.assertIs(options.get_long("file"), option)
        self.assertIn("f", options)
        self.assertIn("file", options)

    def testConvenienceFormReturnsHandle(self):
        options = Options()
        option = options.add_option("n", None, 1, 2)
        self.assertIsInstance(option, Option)
        option.add_sub_option(Integer)
        self.assertIs(options.get_short("n").sub_options[0], Integer)
        self.assertIsNone(options.get_long("n"))

    def testConvenienceFormValidates(self):
        with self.assertRaises(InvalidOptionSpecError):
            Options().add_option("1", None, 0, 0)

    def testDuplicateShortRejected(self):
        options = Options()
        options.add_option("f", "file", 0, 0)
        with self.assertRaises(DuplicateOptionError):
            options.add_option("f", "force", 0, 0)
        self.assertIsNone(options.get_long("force"))
        self.assertEqual(len(options), 1)

    def testDuplicateLongRejected(self):
        options = Options()
        options.add_option("f", "file", 0, 0)
        with self.assertRaises(DuplicateOptionError):
            options.add_option("g", "file", 0, 0)
        self.assertIsNone(options.get_short("g"))

    def testShortAndLongNamespacesAreSeparate(self):
        options = Options()
        short = options.add_option("x", None, 0, 0)
        long = options.add_option(None, "x", 0, 0)
        self.assertIs(options.get_short("x"), short)
        self.assertIs(options.get_long("x"), long)

    def testIterationFollowsRegistrationOrder(self):
        options = Options()
        names = ["a", "b", "c"]
        for name in names:
            options.add_option(name, None, 0, 0)
        self.assertEqual([option.short for option in options], names)

    def testAddOptionArityChecked(self):
        with self.assertRaises(TypeError):
            Options().add_option("f", "file")

    def testDefaultSeparator(self):
        self.assertEqual(Options().separator, ",")

    def testSetSeparator(self):
        options = Options().set_separator(";")
        self.assertEqual(options.separator, ";")
        self.assertEqual(Options(":").separator, ":")

    def testWhitespaceSeparatorRejected(self):
        for separator in (" ", "\t", "\n", "\r", "\v", "\f"):
            with self.assertRaises(InvalidSeparatorError, msg=repr(separator)):
                Options().set_separator(separator)

    def testMultiCharacterSeparatorRejected(self):
        for separator in ("", ",,", 1):
            with self.assertRaises(InvalidSeparatorError, msg=repr(separator)):
                Options().set_separator(separator)


class TestFreezing(TestCase):
    """Build-then-freeze discipline."""

    def setUp(self):
        self.options = Options()
        self.option = self.options.add_option("f", "file", 0, 1)
        self.option.add_sub_option(String)

    def testParserFreezesRegistry(self):
        self.assertFalse(self.options.frozen)
        Parser(self.options)
        self.assertTrue(self.options.frozen)
        self.assertTrue(self.option.frozen)

    def testFrozenRegistryRejectsChanges(self):
        Parser(self.options)
        with self.assertRaises(FrozenOptionError):
            self.options.add_option("g", None, 0, 0)
        with self.assertRaises(FrozenOptionError):
            self.options.set_separator(";")
        with self.assertRaises(FrozenOptionError):
            self.option.add_sub_option(String)
        with self.assertRaises(FrozenOptionError):
            self.option.add_kw_sub_option("mode", String)

    def testFreezeIsIdempotent(self):
        self.options.freeze()
        self.options.freeze()
        self.assertTrue(self.options.frozen)


if __name__ == "__main__":
    unittest.main()
