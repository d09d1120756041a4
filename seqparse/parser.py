"""
Seqparse sequential parser.

The parser scans an argument vector once, left to right:

- "--" ends parsing; every later argument is kept verbatim as remaining.
- An argument shaped like a flag (OPTION_FLAG: ^-[-]?[A-Za-z_].*$) is looked up by
  long name ("--name") or short name ("-n") and opens a new parameter.
- The argument right after a flag is its value argument: it is split on the
  registry's separator (see seqparse.splitter) and every token becomes either a
  keyword sub-parameter (key=value) or the next positional one. Positional values
  are validated against the option's sub-options in order; once the last declared
  sub-option is reached it is reused for every further value.
- A value argument closes its parameter, so the next bare value has no option to
  belong to.

With stop_on_non_option, the first unknown flag or misplaced value stops the scan
and it, together with everything after it, becomes the remaining arguments. Without
it, those cases are errors.

Each parameter's positional count is checked against the option's [minimum,
maximum] bounds when the parameter is closed. Any fault aborts the whole parse:
no partial command line is ever returned.

Quick example:
    >>> options = Options()
    >>> options.add_option("f", "file", 1, 1).add_sub_option(String)
    ...
    >>> line = parse(options, ["-f", "out.txt", "--", "rest"])
    >>> line[0].get_sub_parameter(0).as_string(), line.remaining
    ('out.txt', ('rest',))
"""
import copy
import re
import sys

from .faults import *
from .options import Options
from .results import *
from .splitter import Splitter, classify
from .utils import *

OPTION_FLAG = re.compile(r"^-[-]?[A-Za-z_].*$", re.DOTALL)
TERMINATOR = "--"


class Parser:
    """
    Reusable parser bound to one option registry.

    Parameters
    - options: Options      the registry; frozen on construction
    - shell: bool           render faults to stderr and exit instead of raising
    - fancy: bool           render faults inside a panel (shell mode)
    - colorful: bool        render faults with colors (shell mode)
    - prog: str             program name shown in rendered faults
    """

    def __init__(self, options, /, *, shell=False, fancy=False, colorful=True, prog=Unset):
        if not isinstance(options, Options):
            raise TypeError("Parser() argument must be an option registry")
        self.options = options.freeze()
        self.shell = shell
        self.fancy = fancy
        self.colorful = colorful
        self.prog = prog

    def trigger(self, fault, /, **options):
        """
        Surface a fault with this parser's rendering options merged in.
        """
        if self.prog is not Unset:
            options.setdefault("prog", self.prog)
        trigger(fault, **options, shell=self.shell, fancy=self.fancy, colorful=self.colorful)

    def parse(self, args, stop_on_non_option=False, /):
        """
        Parse `args` into a CommandLine; see the module documentation.

        Raises
        - ParseFault subclasses (non-shell mode); exits with status 1 in shell mode.
        - ParseWarning subclasses, only when the warnings filter turns them into
          errors (e.g. warnings.simplefilter("error")). They are not faults and
          abort the parse like any other exception.
        """
        if isinstance(args, str):
            raise TypeError("parse() argument must be a sequence of strings, not a string")
        args = list(args)
        if not all(isinstance(arg, str) for arg in args):
            raise TypeError("parse() argument must be a sequence of strings")
        try:
            return self._parseargs(args, bool(stop_on_non_option))
        except ParseFault as fault:
            return self.trigger(fault)

    def _parseargs(self, args, stop_on_non_option):
        line = CommandLine()
        parameter = None
        stopped = False

        for index, argument in enumerate(args):
            if stopped:
                line._remaining.append(argument)
            elif argument == TERMINATOR:
                self._close(parameter)
                parameter = None
                stopped = True
            elif OPTION_FLAG.match(argument):
                self._close(parameter)
                parameter = None
                if argument.startswith("--"):
                    option = self.options.get_long(argument[2:])
                else:
                    option = self.options.get_short(argument[1:])
                if option is None:
                    if not stop_on_non_option:
                        raise UnrecognizedOptionError(
                            "unknown option %r at %s position" % (argument, ordinal(index + 1)),
                            title="unknown option",
                            code=FaultCode.UNRECOGNIZED_OPTION,
                            hint="check the spelling, or put '--' before arguments that are not options",
                            argument=argument,
                            index=index,
                            docs=getdoc(FaultCode.UNRECOGNIZED_OPTION),
                        )
                    line._remaining.append(argument)
                    stopped = True
                else:
                    parameter = Parameter(option)
                    line._parameters.append(parameter)
            elif parameter is None:
                if not stop_on_non_option:
                    raise MisplacedValueError(
                        "value %r at %s position does not follow an option" % (argument, ordinal(index + 1)),
                        title="misplaced value",
                        code=FaultCode.MISPLACED_VALUE,
                        hint="each option takes a single value argument; join sub-values with %r" % self.options.separator,
                        argument=argument,
                        index=index,
                        docs=getdoc(FaultCode.MISPLACED_VALUE),
                    )
                line._remaining.append(argument)
                stopped = True
            else:
                self._collect(parameter, argument, index)
                self._close(parameter)
                parameter = None

        self._close(parameter)
        return line

    def _collect(self, parameter, argument, index):
        """
        Dispatch the tokens of one value argument to `parameter`.
        """
        option = parameter.option
        sub_options = option.sub_options
        kw_sub_options = option.kw_sub_options
        cursor = 0

        for token in Splitter(argument, self.options.separator):
            key, value = classify(token)

            if key is None:
                if not sub_options:
                    raise NoPositionalParametersError(
                        "option %r takes no positional parameters, got %r at %s position" % (
                            option.name, value, ordinal(index + 1)
                        ),
                        title="no positional parameters allowed",
                        code=FaultCode.NO_POSITIONAL_PARAMETERS,
                        hint="pass keyword parameters only (key=value)" if kw_sub_options else "remove the value",
                        option=option.name,
                        argument=argument,
                        value=value,
                        index=index,
                        docs=getdoc(FaultCode.NO_POSITIONAL_PARAMETERS),
                    )
                parameter._append(self._validate(value, sub_options[cursor], option, argument, index))
                if cursor < len(sub_options) - 1:
                    cursor += 1
                continue

            try:
                sub_option = kw_sub_options[key]
            except KeyError:
                raise UnknownKeywordParameterError(
                    "keyword parameter %r not allowed for option %r at %s position" % (
                        key, option.name, ordinal(index + 1)
                    ),
                    title="unknown keyword parameter",
                    code=FaultCode.UNKNOWN_KEYWORD_PARAMETER,
                    hint="allowed keywords: %s" % (", ".join(sorted(kw_sub_options)) or "none"),
                    option=option.name,
                    argument=argument,
                    key=key,
                    index=index,
                    docs=getdoc(FaultCode.UNKNOWN_KEYWORD_PARAMETER),
                ) from None

            previous = parameter._assign(key, self._validate(value, sub_option, option, argument, index))
            if previous is not None:
                self.trigger(OverriddenKeywordWarning(
                    "keyword parameter %r of option %r given more than once at %s position" % (
                        key, option.name, ordinal(index + 1)
                    ),
                    title="overridden keyword parameter",
                    code=FaultCode.OVERRIDDEN_KEYWORD,
                    hint="the last value (%r) replaces %r" % (value, previous.value),
                    option=option.name,
                    argument=argument,
                    key=key,
                    value=value,
                    index=index,
                    docs=getdoc(FaultCode.OVERRIDDEN_KEYWORD),
                ))

    def _validate(self, value, sub_option, option, argument, index):
        try:
            return SubParameter(value, sub_option)
        except InvalidValueError as error:
            raise copy.replace(
                error,
                option=option.name,
                argument=argument,
                index=index,
                docs=getdoc(FaultCode.INVALID_VALUE),
            ) from None

    def _close(self, parameter):
        """
        Check the positional count of a finished parameter.
        """
        if parameter is None:
            return
        option = parameter.option
        if not option.minimum <= len(parameter) <= option.maximum:
            if option.minimum == option.maximum:
                expected = "%d" % option.minimum
            else:
                expected = "%d to %d" % (option.minimum, option.maximum)
            raise ArityViolationError(
                "option %r expects %s positional parameters, got %d" % (option.name, expected, len(parameter)),
                title="invalid number of positional parameters",
                code=FaultCode.ARITY_VIOLATION,
                hint="separate positional values with %r" % self.options.separator,
                option=option.name,
                value=len(parameter),
                docs=getdoc(FaultCode.ARITY_VIOLATION),
            )


def parse(options, args, stop_on_non_option=False, /):
    """
    Parse `args` against `options` and return the CommandLine (raises on faults).
    """
    return Parser(options).parse(args, stop_on_non_option)


def parse_or_exit(options, args=Unset, stop_on_non_option=False, /, *, prog=Unset, fancy=False, colorful=True):
    """
    Shell-mode front door: parse sys.argv[1:] (or `args`); on a fault, render it
    to stderr with rich and exit with status 1.
    """
    return Parser(options, shell=True, fancy=fancy, colorful=colorful, prog=prog).parse(
        coalesce(args, sys.argv[1:]), stop_on_non_option
    )


__all__ = (
    "OPTION_FLAG",
    "TERMINATOR",
    "Parser",
    "parse",
    "parse_or_exit",
)
