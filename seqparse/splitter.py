r"""
Seqparse sub-parameter splitting.

A value argument such as

    n=3,'a,b',x\,y

carries several sub-parameters. Splitting happens in two steps:

1. Splitter: a left-to-right scan cutting the argument on the separator, except
   inside single or double quotes and right after a backslash. Quotes and
   backslashes are kept verbatim in the tokens:

       ["n=3", "'a,b'", "x\\,y"]

2. classify(): each token is matched against KEYWORD_TOKEN,

       ^(?:(KEY)=)?(['"]?)(.*)\2$

   giving an optional keyword and a value. Matching surrounding quotes are
   stripped. Unquoted values are unescaped ("\\\\" -> "\\", "\\X" -> "X", a
   trailing lone backslash is dropped); quoted values are left untouched, and
   keys are never unescaped:

       ("n", "3"), (None, "a,b"), (None, "x,y")

Scanning rules
- A backslash escapes exactly one following character, whatever it is: that
  character neither splits nor opens/closes a quote.
- A quote of one kind is literal while inside a quote of the other kind.
- Unterminated quotes are kept and swallow the rest of the argument.
- An empty argument yields one empty token; an argument made of the separator
  alone yields two.
"""
import re

KEY_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*(?:-[A-Za-z0-9_]+)*"
KEYWORD_TOKEN = re.compile(r"^(?:(%s)=)?(['\"]?)(.*)\2$" % KEY_PATTERN, re.DOTALL)

_ESCAPE = re.compile(r"\\(.?)", re.DOTALL)


class Splitter:
    """
    Single-pass iterator over the raw sub-parameter tokens of one argument.

    Parameters
    - text: str          the value argument
    - separator: str     one character (the registry's separator)

    The iterator cannot be rewound; build a new Splitter to scan again.
    """

    def __init__(self, text, /, separator=","):
        if not isinstance(text, str):
            raise TypeError("Splitter() argument must be a string")
        if not isinstance(separator, str) or len(separator) != 1:
            raise TypeError("Splitter() separator must be a single character")
        self._text = text
        self._separator = separator
        self._position = 0
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self):
        if self._exhausted:
            raise StopIteration

        text = self._text
        buffer = []
        single = double = escaped = False
        while self._position < len(text):
            char = text[self._position]
            self._position += 1

            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == self._separator and not (single or double):
                return "".join(buffer)
            elif char == "'" and not double:
                single = not single
            elif char == '"' and not single:
                double = not double
            buffer.append(char)

        self._exhausted = True
        return "".join(buffer)

    def __repr__(self):
        return "Splitter(%r, separator=%r)" % (self._text, self._separator)


def split(text, separator=",", /):
    """
    Return every raw token of `text` as a list.
    """
    return list(Splitter(text, separator))


def unescape(text, /):
    r"""
    Collapse backslash escapes: "\\\\" -> "\\", "\\X" -> "X", trailing "\\" dropped.
    """
    return _ESCAPE.sub(r"\1", text)


def classify(token, /):
    """
    Split one raw token into (key, value); key is None for positional tokens.
    """
    match = KEYWORD_TOKEN.match(token)
    key, quote, value = match.groups()
    if not quote:
        value = unescape(value)
    return key, value


__all__ = (
    "KEY_PATTERN",
    "KEYWORD_TOKEN",
    "Splitter",
    "split",
    "unescape",
    "classify",
)
