"""
Tokenizer for SVG path data.

Splits a 'd' attribute into command letters and number strings. Commas
become whitespace; whitespace is inserted around command letters, before a
sign that follows a number, and before a second decimal point in one run
("0.5.5" is two numbers).
"""

import re

COMMAND_LETTERS = "MmZzLlHhVvCcSsQqTtAa"

_COMMAND_RE = re.compile(f"([{COMMAND_LETTERS}])")
_SIGN_RE = re.compile(r"([0-9.])([+\-])")
_EXTRA_DOT_RE = re.compile(r"(\.[0-9]*)(?=\.)")
_NUMBER_RE = re.compile(r"^[+\-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+\-]?[0-9]+)?$")


def tokenize(d):
    """
    Split path data into tokens.

    Args:
        d: SVG path 'd' string

    Returns:
        list of token strings; empty for blank input
    """
    d = d.replace(",", " ")
    d = _COMMAND_RE.sub(r" \1 ", d)
    d = _SIGN_RE.sub(r"\1 \2", d)
    d = _EXTRA_DOT_RE.sub(r"\1 ", d)
    return d.split()


def is_command(token):
    return len(token) == 1 and token.isalpha()


def is_number(token):
    return _NUMBER_RE.match(token) is not None
