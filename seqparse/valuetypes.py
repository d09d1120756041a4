r"""
Seqparse value types and sub-option specifications.

Overview
- ValueType: a capability answering “does this string satisfy this value kind”.
  check(raw) is pure, deterministic and never raises: a conversion failure simply
  reports False. None is rejected by every built-in kind.
- Built-in kinds (singletons)
  • STRING: any str.
  • INTEGER: 32-bit signed decimal; optional sign and leading zeros allowed.
  • FLOAT / DOUBLE: the interpreter's float() grammar (exponents, inf, nan)
    (surrounding whitespace allowed), without digit-grouping underscores.
  • POSITIVE_INTEGER, NON_NEGATIVE_INTEGER, POSITIVE_FLOAT, NON_NEGATIVE_FLOAT.
- Range factories
  • integer_range(minimum, maximum), float_range(...), double_range(...): build a
    fresh ValueType that parses first and then bound-checks (inclusive). Either
    bound may be None for an open end.
- User-defined kinds
  • ValueType(predicate, name) or the @value_type(name) decorator.

- SubOption: immutable wrapper around one ValueType; describes one positional or
  keyword slot of an option. Identity matters: two sub-options of the same kind
  are distinct unless the same object is shared. Ready-made shared sub-options
  exist for every built-in kind (String, Integer, Float, ...).

Quick example:
    >>> from seqparse.valuetypes import SubOption, integer_range
    >>> percent = SubOption(integer_range(0, 100))
    >>> percent.type.check("42"), percent.type.check("420")
    (True, False)
"""
import math
import re

from .utils import *

INTEGER_MIN = -2 ** 31
INTEGER_MAX = 2 ** 31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


class ValueType(metaclass=SpecType):
    """
    Value kind capability: check(raw) -> bool.

    Parameters
    - predicate: Callable[[str], object]
      Called with the raw string; its truthiness is the verdict. Any exception
      raised by it counts as a rejection.
    - name: str
      Label used in fault messages (defaults to the predicate's __name__).
    """
    __introspectable__ = ("name",)

    def __init__(self, predicate, /, name=Unset):
        if not callable(predicate):
            raise TypeError("value-type predicate must be callable")
        if not isinstance(name, str | Unset):
            raise TypeError("value-type 'name' must be a string")
        self._predicate = predicate
        self._name = coalesce(name, getattr(predicate, "__name__", "value"))

    def check(self, raw, /):
        if raw is None:
            return False
        try:
            return bool(self._predicate(raw))
        except Exception:
            return False

    def __call__(self, raw, /):
        return self.check(raw)


def value_type(name, /):
    """
    Decorator form of ValueType for user-defined kinds.

        @value_type("even")
        def even(raw):
            return int(raw) % 2 == 0
    """
    if not isinstance(name, str):
        raise TypeError("@value_type() argument must be a string")

    def wrapper(predicate):
        return ValueType(predicate, name)

    return rename(wrapper, "value_type")


def _parse_integer(raw):
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw):
        raise ValueError("invalid integer literal %r" % raw)
    if not INTEGER_MIN <= (value := int(raw)) <= INTEGER_MAX:
        raise OverflowError("integer out of range %r" % raw)
    return value


def _parse_float(raw):
    # float() tolerates digit grouping; command line values do not
    if not isinstance(raw, str) or "_" in raw:
        raise ValueError("invalid floating-point literal %r" % raw)
    return float(raw)


def _bounded(parser, minimum, maximum, name, /):
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValueError("%s range minimum %r exceeds maximum %r" % (name, minimum, maximum))

    def predicate(raw):
        value = parser(raw)
        if math.isnan(value):
            return False
        return (minimum is None or value >= minimum) and (maximum is None or value <= maximum)

    label = "%s[%s..%s]" % (name, "" if minimum is None else minimum, "" if maximum is None else maximum)
    return ValueType(rename(predicate, name + "_range"), label)


def integer_range(minimum=None, maximum=None, /):
    """
    Build an integer kind bounded to [minimum, maximum] (inclusive, None = open).
    """
    return _bounded(_parse_integer, minimum, maximum, "integer")


def float_range(minimum=None, maximum=None, /):
    """
    Build a float kind bounded to [minimum, maximum] (inclusive, None = open).
    """
    return _bounded(_parse_float, minimum, maximum, "float")


def double_range(minimum=None, maximum=None, /):
    """
    Build a double kind bounded to [minimum, maximum] (inclusive, None = open).
    """
    return _bounded(_parse_float, minimum, maximum, "double")


STRING = ValueType(lambda raw: isinstance(raw, str), "string")
INTEGER = ValueType(lambda raw: _parse_integer(raw) is not None, "integer")
FLOAT = ValueType(lambda raw: _parse_float(raw) is not None, "float")
DOUBLE = ValueType(lambda raw: _parse_float(raw) is not None, "double")
POSITIVE_INTEGER = ValueType(lambda raw: _parse_integer(raw) > 0, "positive integer")
NON_NEGATIVE_INTEGER = ValueType(lambda raw: _parse_integer(raw) >= 0, "non-negative integer")
POSITIVE_FLOAT = ValueType(lambda raw: _parse_float(raw) > 0, "positive float")
NON_NEGATIVE_FLOAT = ValueType(lambda raw: _parse_float(raw) >= 0, "non-negative float")


class SubOption(metaclass=SpecType):
    """
    Expected type of one positional or keyword slot of an option.
    """
    __introspectable__ = ("type",)

    def __init__(self, type, /):
        if not isinstance(type, ValueType):
            raise TypeError("sub-option 'type' must be a value-type")
        self._type = type

    def __setattr__(self, name, value):
        if hasattr(self, "_type"):
            raise AttributeError("sub-option is immutable")
        super().__setattr__(name, value)


String = SubOption(STRING)
Integer = SubOption(INTEGER)
Float = SubOption(FLOAT)
Double = SubOption(DOUBLE)
PosInteger = SubOption(POSITIVE_INTEGER)
NonNegInteger = SubOption(NON_NEGATIVE_INTEGER)
PosFloat = SubOption(POSITIVE_FLOAT)
NonNegFloat = SubOption(NON_NEGATIVE_FLOAT)


__all__ = (
    # Types
    "ValueType",
    "SubOption",

    # Factories
    "value_type",
    "integer_range",
    "float_range",
    "double_range",

    # Built-in kinds
    "STRING",
    "INTEGER",
    "FLOAT",
    "DOUBLE",
    "POSITIVE_INTEGER",
    "NON_NEGATIVE_INTEGER",
    "POSITIVE_FLOAT",
    "NON_NEGATIVE_FLOAT",

    # Shared sub-options
    "String",
    "Integer",
    "Float",
    "Double",
    "PosInteger",
    "NonNegInteger",
    "PosFloat",
    "NonNegFloat",
)
