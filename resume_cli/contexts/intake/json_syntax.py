"""
JSON well-formedness check without building the document.

The resume is only validated, never decoded, so this scanner walks the text
with an explicit stack of open containers instead of recursing. Nesting depth
is bounded by MAX_NESTING_DEPTH, not by the interpreter's recursion limit,
and numbers are matched but never converted.
"""

import re
from json import JSONDecodeError
from json.decoder import scanstring

MAX_NESTING_DEPTH = 10000

WHITESPACE = re.compile(r"[ \t\n\r]*")
NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?")
LITERALS = ("true", "false", "null")

CLOSERS = {"{": "}", "[": "]"}


def _skip(doc: str, pos: int) -> int:
    return WHITESPACE.match(doc, pos).end()


def _scan_value(doc: str, pos: int, stack: list) -> tuple[int, bool]:
    """
    Scan one value starting at pos.

    Returns:
        (position after the token, True if a container was opened)
    """
    char = doc[pos : pos + 1]

    if char in CLOSERS:
        if len(stack) >= MAX_NESTING_DEPTH:
            raise JSONDecodeError(f"Exceeded max nesting depth of {MAX_NESTING_DEPTH}", doc, pos)
        stack.append(CLOSERS[char])
        return pos + 1, True

    if char == '"':
        _, end = scanstring(doc, pos + 1, True)
        return end, False

    match = NUMBER.match(doc, pos)
    if match:
        return match.end(), False

    for literal in LITERALS:
        if doc.startswith(literal, pos):
            return pos + len(literal), False

    raise JSONDecodeError("Expecting value", doc, pos)


def _scan_key(doc: str, pos: int) -> int:
    """Scan an object key and its colon; returns the position of the value."""
    if doc[pos : pos + 1] != '"':
        raise JSONDecodeError("Expecting property name enclosed in double quotes", doc, pos)
    _, pos = scanstring(doc, pos + 1, True)
    pos = _skip(doc, pos)
    if doc[pos : pos + 1] != ":":
        raise JSONDecodeError("Expecting ':' delimiter", doc, pos)
    return _skip(doc, pos + 1)


def check_json_syntax(doc: str) -> None:
    """
    Check that doc holds exactly one well-formed JSON value.

    Follows RFC 8259: only space, tab, CR and LF are whitespace, strings may not
    contain raw control characters, and NaN/Infinity are not values.

    Raises:
        JSONDecodeError: At the first offending position
    """
    if doc.startswith("\ufeff"):
        raise JSONDecodeError("Unexpected UTF-8 BOM (decode using utf-8-sig)", doc, 0)

    stack = []
    pos = _skip(doc, 0)
    pos, opened = _scan_value(doc, pos, stack)

    while stack:
        pos = _skip(doc, pos)
        if opened:
            # First member of a fresh container, or an immediately closed one
            opened = False
            if doc[pos : pos + 1] == stack[-1]:
                stack.pop()
                pos += 1
                continue
            if stack[-1] == "}":
                pos = _scan_key(doc, pos)
            pos, opened = _scan_value(doc, pos, stack)
            continue

        char = doc[pos : pos + 1]
        if char == stack[-1]:
            stack.pop()
            pos += 1
        elif char == ",":
            pos = _skip(doc, pos + 1)
            if stack[-1] == "}":
                pos = _scan_key(doc, pos)
            pos, opened = _scan_value(doc, pos, stack)
        else:
            raise JSONDecodeError("Expecting ',' delimiter", doc, pos)

    pos = _skip(doc, pos)
    if pos != len(doc):
        raise JSONDecodeError("Extra data", doc, pos)
