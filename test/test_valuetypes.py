"""
Value types behavioral tests (built-in kinds, ranges, user kinds, sub-options).

Scope
- Validate the check table of every built-in kind, including None and cruft.
- Validate range factories: inclusive bounds, open ends, fresh instances.
- Validate user-defined kinds: exceptions from predicates count as rejections.
- Validate SubOption immutability and identity semantics.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from seqparse import (
    Options,
    parse,
    InvalidValueError,
    STRING,
    INTEGER,
    FLOAT,
    DOUBLE,
    POSITIVE_INTEGER,
    NON_NEGATIVE_INTEGER,
    POSITIVE_FLOAT,
    NON_NEGATIVE_FLOAT,
    ValueType,
    SubOption,
    value_type,
    integer_range,
    float_range,
    double_range,
    String,
    Integer,
)


class TestBuiltinValueTypes(TestCase):
    """Check tables of the built-in kinds."""

    def testStringAcceptsAnyString(self):
        for raw in ("", "abc", "1", " spaced ", "ünïcode"):
            self.assertTrue(STRING.check(raw), raw)

    def testEveryBuiltinRejectsNone(self):
        for kind in (STRING, INTEGER, FLOAT, DOUBLE, POSITIVE_INTEGER,
                     NON_NEGATIVE_INTEGER, POSITIVE_FLOAT, NON_NEGATIVE_FLOAT):
            self.assertFalse(kind.check(None), kind.name)

    def testIntegerAcceptsSignsAndLeadingZeros(self):
        for raw in ("0", "42", "+7", "-7", "007", "-0"):
            self.assertTrue(INTEGER.check(raw), raw)

    def testIntegerRejectsCruft(self):
        for raw in ("", "4.2", "1e3", " 1", "1 ", "0x10", "1_000", "abc", "+", "--1"):
            self.assertFalse(INTEGER.check(raw), raw)

    def testIntegerIsThirtyTwoBit(self):
        self.assertTrue(INTEGER.check("2147483647"))
        self.assertTrue(INTEGER.check("-2147483648"))
        self.assertFalse(INTEGER.check("2147483648"))
        self.assertFalse(INTEGER.check("-2147483649"))

    def testFloatAndDoubleAcceptNativeGrammar(self):
        for kind in (FLOAT, DOUBLE):
            for raw in ("1", "1.5", "+1.5", "-0.25", "001.0", "1e3", "2.5E-3", ".5", "inf", "nan"):
                self.assertTrue(kind.check(raw), (kind.name, raw))

    def testFloatRejectsCruft(self):
        for raw in ("", "abc", "1.5x", "1_0.5", "1,5", " "):
            self.assertFalse(FLOAT.check(raw), raw)

    def testFloatToleratesSurroundingWhitespace(self):
        for kind in (FLOAT, DOUBLE, POSITIVE_FLOAT):
            for raw in (" 1.5", "1.5 ", "\t2.5\n"):
                self.assertTrue(kind.check(raw), (kind.name, raw))

    def testPositiveAndNonNegativeIntegers(self):
        self.assertTrue(POSITIVE_INTEGER.check("1"))
        self.assertFalse(POSITIVE_INTEGER.check("0"))
        self.assertFalse(POSITIVE_INTEGER.check("-1"))
        self.assertTrue(NON_NEGATIVE_INTEGER.check("0"))
        self.assertFalse(NON_NEGATIVE_INTEGER.check("-1"))

    def testPositiveAndNonNegativeFloats(self):
        self.assertTrue(POSITIVE_FLOAT.check("0.1"))
        self.assertFalse(POSITIVE_FLOAT.check("0"))
        self.assertTrue(NON_NEGATIVE_FLOAT.check("0.0"))
        self.assertFalse(NON_NEGATIVE_FLOAT.check("-0.1"))
        self.assertFalse(NON_NEGATIVE_FLOAT.check("nan"))

    def testBuiltinsAreSingletons(self):
        self.assertIs(String.type, STRING)
        self.assertIs(Integer.type, INTEGER)


class TestRangeValueTypes(TestCase):
    """Parameterized range factories."""

    def testIntegerRangeIsInclusive(self):
        percent = integer_range(0, 100)
        self.assertTrue(percent.check("0"))
        self.assertTrue(percent.check("100"))
        self.assertFalse(percent.check("101"))
        self.assertFalse(percent.check("-1"))
        self.assertFalse(percent.check("50.0"))

    def testFloatRangeOpenEnds(self):
        above = float_range(1.5)
        self.assertTrue(above.check("1.5"))
        self.assertTrue(above.check("1e9"))
        self.assertFalse(above.check("1.4"))
        below = double_range(None, -1)
        self.assertTrue(below.check("-1"))
        self.assertFalse(below.check("0"))

    def testRangeRejectsNan(self):
        self.assertFalse(double_range(None, None).check("nan"))

    def testRangeFactoriesReturnFreshInstances(self):
        self.assertIsNot(integer_range(0, 1), integer_range(0, 1))

    def testInvertedRangeRejected(self):
        with self.assertRaises(ValueError):
            integer_range(5, 1)


class TestUserValueTypes(TestCase):
    """User-defined kinds."""

    def testDecoratorBuildsValueType(self):
        @value_type("even")
        def even(raw):
            return int(raw) % 2 == 0

        self.assertIsInstance(even, ValueType)
        self.assertEqual(even.name, "even")
        self.assertTrue(even.check("4"))
        self.assertFalse(even.check("3"))

    def testConversionErrorsBecomeRejections(self):
        even = ValueType(lambda raw: int(raw) % 2 == 0, "even")
        self.assertFalse(even.check("four"))

    def testAnyPredicateErrorBecomesRejection(self):
        @value_type("color")
        def color(raw):
            return {"red": 1, "green": 2}[raw]

        self.assertTrue(color.check("red"))
        self.assertFalse(color.check("blue"))

        options = Options()
        options.add_option("c", None, 1, 1).add_sub_option(SubOption(color))
        self.assertEqual(parse(options, ["-c", "green"])[0].get_sub_parameter(0).as_string(), "green")
        with self.assertRaises(InvalidValueError) as context:
            parse(options, ["-c", "blue"])
        self.assertEqual(context.exception.value, "blue")
        self.assertEqual(context.exception.option, "c")

    def testNameDefaultsToPredicateName(self):
        def lowercase(raw):
            return raw.islower()

        self.assertEqual(ValueType(lowercase).name, "lowercase")

    def testPredicateMustBeCallable(self):
        with self.assertRaises(TypeError):
            ValueType("not callable")


class TestSubOption(TestCase):
    """SubOption wrapper semantics."""

    def testWrapsValueType(self):
        self.assertIs(SubOption(INTEGER).type, INTEGER)

    def testDistinctIdentity(self):
        self.assertIsNot(SubOption(INTEGER), SubOption(INTEGER))

    def testRejectsNonValueType(self):
        with self.assertRaises(TypeError):
            SubOption(int)

    def testImmutable(self):
        sub_option = SubOption(STRING)
        with self.assertRaises(AttributeError):
            sub_option.type = INTEGER
        with self.assertRaises(AttributeError):
            sub_option._type = INTEGER


if __name__ == "__main__":
    unittest.main()
