"""
Call parser: ``<type> <name>(<arg>, <arg>, ...);``
"""
from collections import namedtuple

from .errors import InvalidCallFormat

ParsedCall = namedtuple('ParsedCall', 'name args')

USAGE = " Correct format: functionName(param1, param2)"


def split_parens(text):
    """Return (header, inside) around the first '(' and first ')'."""
    lo, hi = text.find('('), text.find(')')
    if lo == -1 or hi == -1 or hi < lo:
        return None
    return text[:lo], text[lo + 1:hi]


def parse_call(text):
    if text.endswith(';'):
        text = text[:-1]

    parts = split_parens(text)
    if parts is None:
        raise InvalidCallFormat(USAGE)
    header, inside = parts

    words = header.split()
    if len(words) < 2:
        raise InvalidCallFormat(" No function name found.")

    inside = inside.strip()
    args = [a.strip() for a in inside.split(',')] if inside else []
    return ParsedCall(words[1], args)
