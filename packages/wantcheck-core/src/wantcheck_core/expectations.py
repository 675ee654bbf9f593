"""
Expectation extraction.

A comment block whose text starts with the word ``want`` declares that the
analysis must report a finding on that line:

    x = compute()  # want "unused variable x"

The payload is one double-quoted string literal holding a regular
expression. It only has to match part of the finding's message.
"""

from __future__ import annotations

import ast
import io
import re
import tokenize
import warnings

from .config import DEFAULT_MARKER
from .loader import Package
from .log import get_logger
from .models.expectation import Expectation
from .models.position import Position
from .position import sanitize
from .reporting import Reporter

_logger = get_logger("expectations")

KEYWORD = "want"

ExpectationIndex = dict[tuple[str, int], Expectation]


def key_of(posn: Position) -> tuple[str, int]:
    return (posn.filename, posn.line)


def unquote(text: str) -> str:
    """Interpret text as exactly one double-quoted string literal."""
    if not text.startswith('"') or text.startswith('"""'):
        raise ValueError("invalid syntax: expected a double-quoted string")
    try:
        tokens = [
            t
            for t in tokenize.generate_tokens(io.StringIO(text).readline)
            if t.type not in (tokenize.NEWLINE, tokenize.NL, tokenize.ENDMARKER)
        ]
    except (tokenize.TokenError, SyntaxError) as e:
        raise ValueError(f"invalid syntax: {e}") from e
    if len(tokens) != 1 or tokens[0].type != tokenize.STRING:
        raise ValueError("invalid syntax: expected a single string literal")

    # unknown escapes such as "\d" warn in Python; treat them as errors here
    with warnings.catch_warnings():
        warnings.simplefilter("error", SyntaxWarning)
        warnings.simplefilter("error", DeprecationWarning)
        try:
            value = ast.literal_eval(tokens[0].string)
        except (ValueError, SyntaxError, SyntaxWarning, DeprecationWarning) as e:
            raise ValueError(f"invalid syntax: {e}") from e
    if not isinstance(value, str):
        raise ValueError("invalid syntax: expected a string literal")
    return value


def _want_payload(text: str) -> str | None:
    """Return what follows the ``want`` keyword, or None if text is not an annotation."""
    if not text.startswith(KEYWORD):
        return None
    rest = text[len(KEYWORD):]
    if rest and not (rest[0].isspace() or rest[0] == '"'):
        return None
    return rest.strip()


def extract_expectations(t: Reporter, package: Package, marker: str = DEFAULT_MARKER) -> ExpectationIndex:
    """Read expectations out of the comments of every file in package.

    Malformed annotations are reported to t and skipped.
    """
    index: ExpectationIndex = {}
    for file in package.files:
        for group in file.comments:
            payload = _want_payload(group.text())
            if payload is None:
                continue
            posn = sanitize(package.position(file, group.line), marker)
            try:
                pattern = unquote(payload)
            except ValueError as e:
                t.errorf("%s: in 'want' comment: %s", posn, e)
                continue
            try:
                rx = re.compile(pattern)
            except (re.error, OverflowError, RecursionError) as e:
                t.errorf("%s: %s", posn, e)
                continue
            # a later annotation at the same position replaces the earlier one
            index[key_of(posn)] = Expectation(position=posn, pattern=rx)
    _logger.debug("%d expectations in %s", len(index), package.name)
    return index
