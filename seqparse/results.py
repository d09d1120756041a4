"""
Seqparse parse results.

- SubParameter: one validated value together with the sub-option it satisfied.
- Parameter: one occurrence of a recognized option on the command line, with its
  positional sub-parameters (ordered) and keyword sub-parameters (by key).
- CommandLine: the parameters in the order their options were encountered, plus
  the remaining arguments that were not consumed.

Only the parser fills Parameter and CommandLine; callers see read-only snapshots
through the public properties. Results compare structurally: two command lines
are equal when they hold the same options (by identity) with equal values in the
same order, and the same remaining arguments.
"""
from .faults import *
from .utils import *
from .valuetypes import SubOption


class SubParameter(metaclass=SpecType):
    """
    Raw value of one sub-parameter, validated against its sub-option.

    Raises
    - InvalidValueError: the value is None or fails the sub-option's type check.
    """
    __introspectable__ = ("value", "sub_option")
    __displayable__ = ("value",)

    def __init__(self, value, sub_option, /):
        if not isinstance(sub_option, SubOption):
            raise TypeError("sub-parameter 'sub_option' must be a sub-option")
        if value is None or not sub_option.type.check(value):
            raise InvalidValueError(
                "invalid %s value %r" % (sub_option.type.name, value),
                title="invalid value",
                code=FaultCode.INVALID_VALUE,
                hint="supply a value of type %s" % sub_option.type.name,
                value=value,
            )
        self._value = value
        self._sub_option = sub_option

    def __eq__(self, other):
        if not isinstance(other, SubParameter):
            return NotImplemented
        return self._value == other._value and self._sub_option is other._sub_option

    __hash__ = None

    def is_empty(self):
        return not self._value

    def as_string(self):
        return self._value

    def as_int(self):
        return int(self._value)

    def as_float(self):
        return float(self._value)

    # Python has a single binary floating-point type
    as_double = as_float


class Parameter(metaclass=SpecType):
    """
    One invocation of an option and the sub-parameters collected for it.
    """
    __introspectable__ = ("option", "sub_parameters", "kw_sub_parameters")

    def __init__(self, option, /):
        self._option = option
        self._sub_parameters = []
        self._kw_sub_parameters = {}

    def __len__(self):
        return len(self._sub_parameters)

    def __eq__(self, other):
        if not isinstance(other, Parameter):
            return NotImplemented
        return (
            self._option is other._option and
            self._sub_parameters == other._sub_parameters and
            self._kw_sub_parameters == other._kw_sub_parameters
        )

    __hash__ = None

    def get_sub_parameter(self, index, /):
        return self._sub_parameters[index]

    def get_kw_sub_parameter(self, key, /):
        return self._kw_sub_parameters.get(key)

    def has_kw_sub_parameter(self, key, /):
        return key in self._kw_sub_parameters

    def _append(self, sub_parameter, /):
        self._sub_parameters.append(sub_parameter)

    def _assign(self, key, sub_parameter, /):
        """
        Store a keyword sub-parameter; returns the value it replaced, if any.
        """
        previous = self._kw_sub_parameters.get(key)
        self._kw_sub_parameters[key] = sub_parameter
        return previous


class CommandLine(metaclass=SpecType):
    """
    Structured command line: parameters in encounter order and remaining arguments.
    """
    __introspectable__ = ("parameters", "remaining")

    def __init__(self):
        self._parameters = []
        self._remaining = []

    def __iter__(self):
        return iter(self._parameters)

    def __len__(self):
        return len(self._parameters)

    def __getitem__(self, index):
        return self._parameters[index]

    def __eq__(self, other):
        if not isinstance(other, CommandLine):
            return NotImplemented
        return self._parameters == other._parameters and self._remaining == other._remaining

    __hash__ = None

    def get_parameters(self, name, /):
        """
        All parameters whose option has the given short or long name.
        """
        return tuple(
            parameter
            for parameter in self._parameters
            if name in (parameter.option.short, parameter.option.long)
        )


__all__ = (
    "SubParameter",
    "Parameter",
    "CommandLine",
)
