"""
Seqparse faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every issue the registry
  builder or the parser can report. Codes are grouped by domain.
- ParseFault / ParseWarning: base types that carry message + options and know how
  to render themselves through rich in a short, lowercased, actionable way.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Domains
- specification (2110x): raised while building the option registry
  • InvalidOptionSpecError, InvalidSeparatorError, DuplicateOptionError, FrozenOptionError
- parsing (2111x): raised while scanning an argument vector
  • UnrecognizedOptionError, MisplacedValueError, UnknownKeywordParameterError,
    NoPositionalParametersError, InvalidValueError, ArityViolationError
- warnings (2211x)
  • OverriddenKeywordWarning

Every parse fault aborts the whole parse: the parser never hands back a partial
command line. Context for diagnostics travels in the fault's options mapping
(argument, option, key, value, index, ...).

Integration
- Library code raises faults directly or through Parser.trigger(fault, **ctx).
- In non-shell mode, exceptions are raised and warnings go through warnings.warn;
  in shell mode, both are rendered to stderr via rich and errors exit with status 1.
"""
import copy
import os
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    - numeric ranges encode domains (specification, parsing, warnings).
    - spacing leaves room for future additions without reshuffling existing codes.
    - normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- specification errors (2110x) ---
    INVALID_OPTION_SPEC         = 21101
    INVALID_SEPARATOR           = 21102
    DUPLICATE_OPTION            = 21103
    FROZEN_OPTION               = 21104

    # --- parsing errors (2111x) ---
    UNRECOGNIZED_OPTION         = 21111
    MISPLACED_VALUE             = 21112
    UNKNOWN_KEYWORD_PARAMETER   = 21113
    NO_POSITIONAL_PARAMETERS    = 21114
    INVALID_VALUE               = 21115
    ARITY_VIOLATION             = 21116

    # --- warnings (2211x) ---
    OVERRIDDEN_KEYWORD          = 22111

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _program(options):
    try:
        return options["prog"]
    except KeyError:
        return getattr(__import__("__main__"), "__prog__", os.path.basename(sys.argv[0]) or "seqparse")


def _render(fault, title, defaults, /):
    """
    build the rich renderable shared by errors and warnings.

    layout: a "[ prog - code | Title ]" header, the message, then "→ hint"
    and an optional docs line; fancy mode wraps the body in a Panel.
    """
    options = fault.options
    colorful = options.get("colorful", True)
    fancy = options.get("fancy", False)

    styles = defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if colorful else Text(fragment.plain)
        return Text(str(fragment), style if colorful else "")

    code = options.get("code")
    header = Text.assemble(
        "[ ",
        text(_program(options), styler("prog-name")),
        " - ",
        text(code.normalize() if isinstance(code, FaultCode) else "", styler("code")),
        " | ",
        text(options.get("title", "").title(), styler(title)),
        " ]"
    )
    body = [text(fault.message, styler(title.replace("title", "message")))]
    if hint := options.get("hint"):
        body.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))
    if docs := options.get("docs"):
        body.append(text(docs, styler("docs")))

    if fancy:
        try:
            width = int((console.width - 4) * options["ratio"])
        except KeyError:
            width = None
        return Panel(Group(*body), title=header, title_align="left", width=width)

    return Group(header, *body)


class ParseFault(Exception):
    """
    base class of every error raised by seqparse.

    - message: one lowercased sentence naming the offending input.
    - options: read-only mapping with title, code, hint and context
      (argument, option, key, value, index) for diagnostics.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message or ""

    def __getattr__(self, name):
        try:
            return self.__dict__["options"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __rich__(self):
        return _render(self, "error-title", {
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
            "docs": "underline #00E5FF dim",
        })

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class SpecificationFault(ParseFault):
    """
    base class of the faults raised while building an option registry.
    """


class InvalidOptionSpecError(SpecificationFault, ValueError): ...
class InvalidSeparatorError(SpecificationFault, ValueError): ...
class DuplicateOptionError(SpecificationFault, ValueError): ...
class FrozenOptionError(SpecificationFault, TypeError): ...

class UnrecognizedOptionError(ParseFault): ...
class MisplacedValueError(ParseFault): ...
class UnknownKeywordParameterError(ParseFault): ...
class NoPositionalParametersError(ParseFault): ...
class InvalidValueError(ParseFault, ValueError): ...
class ArityViolationError(ParseFault): ...


class ParseWarning(Warning):
    """
    base class of the non-fatal notices emitted while parsing.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message or ""

    def __rich__(self):
        return _render(self, "warning-title", {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",
            "warning-title": "bold #FFC2E0",
            "warning-message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
            "docs": "underline #FFB400 dim",
        })

    def __trigger__(self):
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=self.options.get("stacklevel", 2))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class OverriddenKeywordWarning(ParseWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace() before triggering.
    - in shell mode, rendering happens via the rich console; otherwise, errors are
      raised and warnings are emitted through the warnings module.

    typical options
    - shell, fancy, colorful, prog, title, code, hint, docs, and any other context
      the reporter may want to show (argument, option, key, value, index).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys are
    FaultCode instances and values are short documentation strings; returns None
    when nothing is registered.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParseFault",
    "SpecificationFault",
    "InvalidOptionSpecError",
    "InvalidSeparatorError",
    "DuplicateOptionError",
    "FrozenOptionError",
    "UnrecognizedOptionError",
    "MisplacedValueError",
    "UnknownKeywordParameterError",
    "NoPositionalParametersError",
    "InvalidValueError",
    "ArityViolationError",
    "ParseWarning",
    "OverriddenKeywordWarning",
    "trigger",
    "getdoc",
)
