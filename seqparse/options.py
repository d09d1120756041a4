r"""
Seqparse option specifications and the option registry.

Overview
- Option: one recognized flag, with a short and/or long name, bounds on the number
  of positional sub-parameters, the ordered positional sub-options and the keyword
  sub-options.
- Options: the registry. Indexes options by short and long name, rejects
  duplicates, and holds the separator used to split one value argument into
  sub-parameters (default ",").

Naming rules (ASCII identifiers)
- short:   ^[A-Za-z_][A-Za-z0-9_]*$                    e.g. "f", "v2", "_x"
- long:    ^[A-Za-z_][A-Za-z0-9_]*(-[A-Za-z0-9_]+)*$    e.g. "file", "dry-run"
- keyword: same syntax as long names.

Lifecycle (build-then-freeze)
- Options.add_option(...) registers an option and returns it as the handle of the
  option under construction; add_sub_option/add_kw_sub_option then describe its
  slots.
- The first Parser built on a registry freezes it: from then on neither the registry
  nor any of its options accept changes (FrozenOptionError), so a registry can be
  shared by reference between parse calls.

Quick example:
    >>> from seqparse import Options, Integer, String
    >>> options = Options()
    >>> options.add_option("n", "count", 1, 2).add_sub_option(Integer)
    ...
    >>> options.add_option("o", "output", 1, 1).add_sub_option(String).add_kw_sub_option("mode", String)
    ...
"""
import re

from .faults import *
from .utils import *
from .valuetypes import SubOption

SHORT_NAME = r"^[A-Za-z_][A-Za-z0-9_]*$"
LONG_NAME = r"^[A-Za-z_][A-Za-z0-9_]*(-[A-Za-z0-9_]+)*$"

WHITESPACE = frozenset(" \t\n\r\v\f")


def _check_count(count, label, option, /):
    if not isinstance(count, int) or isinstance(count, bool):
        raise InvalidOptionSpecError(
            "%s number of positional parameters must be an integer, not %r" % (label, count),
            title="invalid option specification",
            code=FaultCode.INVALID_OPTION_SPEC,
            hint="use whole numbers such that 0 <= minimum <= maximum",
            option=option,
            value=count,
        )


class Option(metaclass=SpecType):
    """
    Declared option: names, positional arity and sub-option slots.

    Parameters
    - short: str | None    short name, matched by "-<short>"
    - long: str | None     long name, matched by "--<long>"
    - minimum: int         minimum number of positional sub-parameters
    - maximum: int         maximum number of positional sub-parameters

    Raises
    - InvalidOptionSpecError: no name, malformed name, or bounds outside 0 <= min <= max.
    """
    __introspectable__ = (
        "short",
        "long",
        "minimum",
        "maximum",
        "sub_options",
        "kw_sub_options",
    )
    __displayable__ = ("short", "long", "minimum", "maximum")

    def __init__(self, short=None, long=None, minimum=0, maximum=0, /):
        if short is None and long is None:
            raise InvalidOptionSpecError(
                "unrecognizable option, either a short or a long name must be supplied",
                title="invalid option specification",
                code=FaultCode.INVALID_OPTION_SPEC,
                hint="give the option a short name (e.g. 'f'), a long name (e.g. 'file') or both",
            )
        for name, pattern, kind in ((short, SHORT_NAME, "short"), (long, LONG_NAME, "long")):
            if name is not None and not (isinstance(name, str) and re.fullmatch(pattern, name)):
                raise InvalidOptionSpecError(
                    "invalid %s option name %r" % (kind, name),
                    title="invalid option specification",
                    code=FaultCode.INVALID_OPTION_SPEC,
                    hint="%s names must match %s" % (kind, pattern),
                    value=name,
                )

        label = "/".join(filter(None, (short, long)))
        _check_count(minimum, "minimum", label)
        _check_count(maximum, "maximum", label)
        if minimum < 0 or maximum < 0 or minimum > maximum:
            raise InvalidOptionSpecError(
                "invalid number of positional parameters (%d..%d) for option %r" % (minimum, maximum, label),
                title="invalid option specification",
                code=FaultCode.INVALID_OPTION_SPEC,
                hint="use whole numbers such that 0 <= minimum <= maximum",
                option=label,
                value=(minimum, maximum),
            )

        self._short = short
        self._long = long
        self._minimum = minimum
        self._maximum = maximum
        self._sub_options = []
        self._kw_sub_options = {}
        self._frozen = False

    @property
    def name(self):
        """
        Display name: the long name when present, otherwise the short one.
        """
        return self._long if self._long is not None else self._short

    @property
    def flags(self):
        """
        Spellings accepted on the command line, e.g. ("-f", "--file").
        """
        return tuple(
            prefix + name
            for prefix, name in (("-", self._short), ("--", self._long))
            if name is not None
        )

    @property
    def frozen(self):
        return self._frozen

    def _ensure_mutable(self):
        if self._frozen:
            raise FrozenOptionError(
                "option %r can no longer be changed, its registry is in use by a parser" % self.name,
                title="frozen option",
                code=FaultCode.FROZEN_OPTION,
                hint="declare every sub-option before parsing",
                option=self.name,
            )

    def add_sub_option(self, sub_option, /):
        """
        Append one positional slot; the last slot is reused for surplus values.
        """
        self._ensure_mutable()
        if not isinstance(sub_option, SubOption):
            raise TypeError("add_sub_option() argument must be a sub-option")
        self._sub_options.append(sub_option)
        return self

    def add_kw_sub_option(self, key, sub_option, /):
        """
        Declare (or redeclare) the keyword slot `key`.
        """
        self._ensure_mutable()
        if not isinstance(key, str) or not re.fullmatch(LONG_NAME, key):
            raise InvalidOptionSpecError(
                "invalid keyword name %r for option %r" % (key, self.name),
                title="invalid option specification",
                code=FaultCode.INVALID_OPTION_SPEC,
                hint="keyword names must match %s" % LONG_NAME,
                option=self.name,
                key=key,
            )
        if not isinstance(sub_option, SubOption):
            raise TypeError("add_kw_sub_option() second argument must be a sub-option")
        self._kw_sub_options[key] = sub_option
        return self

    def _freeze(self):
        self._frozen = True


class Options(metaclass=SpecType):
    """
    Registry of options indexed by short and long name.

    - add_option(option) or add_option(short, long, minimum, maximum)
    - get_short(name) / get_long(name): the option, or None on a miss
    - separator / set_separator(ch): character splitting a value argument
    """
    __introspectable__ = ("options", "separator")

    def __init__(self, separator=",", /):
        self._options = []
        self._shorts = {}
        self._longs = {}
        self._separator = ","
        self._frozen = False
        self.set_separator(separator)

    def __iter__(self):
        return iter(self._options)

    def __len__(self):
        return len(self._options)

    def __contains__(self, name):
        return name in self._shorts or name in self._longs

    @property
    def frozen(self):
        return self._frozen

    def _ensure_mutable(self):
        if self._frozen:
            raise FrozenOptionError(
                "the option registry can no longer be changed, it is in use by a parser",
                title="frozen registry",
                code=FaultCode.FROZEN_OPTION,
                hint="build the whole registry before parsing",
            )

    def add_option(self, *parameters):
        """
        Register an option and return it as the handle for further building.

        Forms
        - add_option(option)
        - add_option(short, long, minimum, maximum)

        Raises
        - InvalidOptionSpecError: malformed names or bounds (second form).
        - DuplicateOptionError: the short or long name is already registered;
          the registry is left unchanged.
        """
        self._ensure_mutable()
        match parameters:
            case (Option() as option,):
                pass
            case (short, long, minimum, maximum):
                option = Option(short, long, minimum, maximum)
            case _:
                raise TypeError("add_option() takes an option or (short, long, minimum, maximum)")

        for index, prefix, name in ((self._shorts, "-", option.short), (self._longs, "--", option.long)):
            if name is not None and name in index:
                raise DuplicateOptionError(
                    "duplicate option %r" % (prefix + name),
                    title="duplicate option",
                    code=FaultCode.DUPLICATE_OPTION,
                    hint="every short and long name may be registered only once",
                    option=option.name,
                    argument=prefix + name,
                )

        self._options.append(option)
        if option.short is not None:
            self._shorts[option.short] = option
        if option.long is not None:
            self._longs[option.long] = option
        return option

    def get_short(self, name, /):
        return self._shorts.get(name)

    def get_long(self, name, /):
        return self._longs.get(name)

    def set_separator(self, separator, /):
        """
        Set the sub-parameter separator; any single non-whitespace character.
        """
        self._ensure_mutable()
        if not isinstance(separator, str) or len(separator) != 1:
            raise InvalidSeparatorError(
                "separator must be a single character, not %r" % (separator,),
                title="invalid separator",
                code=FaultCode.INVALID_SEPARATOR,
                hint="pick one printable character such as ',' or ';'",
                value=separator,
            )
        if separator in WHITESPACE:
            raise InvalidSeparatorError(
                "whitespace %r cannot be used as separator" % separator,
                title="invalid separator",
                code=FaultCode.INVALID_SEPARATOR,
                hint="pick one printable character such as ',' or ';'",
                value=separator,
            )
        self._separator = separator
        return self

    def freeze(self):
        """
        Make the registry and all its options read-only (idempotent).
        """
        self._frozen = True
        for option in self._options:
            option._freeze()
        return self


__all__ = (
    "SHORT_NAME",
    "LONG_NAME",
    "Option",
    "Options",
)
