"""Text normalization applied before parsing."""

from __future__ import annotations

import re

_UNICODE_REPLACEMENTS = {
    "−": "-",
    "–": "-",
    "×": "*",
    "÷": "/",
    "·": "*",
    "∙": "*",
    "⁄": "/",
}

_SUPERSCRIPT_MAP = {
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
}

_WHITESPACE = re.compile(r"\s+")

# digit then ( or x; ) then (, x or digit; x then ( or digit
_IMPLICIT_MULTIPLICATION = re.compile(r"(?<=\d)(?=[(x])|(?<=\))(?=[(x\d])|(?<=x)(?=[(\d])")


def normalize_expression(expression: str) -> str:
    """Lower-cases, strips whitespace and makes implicit multiplication explicit.

    Never fails: the result may still be rejected by the parser.

    Args:
        expression: Raw user input.

    Returns:
        Normalized expression text.
    """
    text = _WHITESPACE.sub("", expression).lower()
    text = _normalize_math_unicode(text)
    return _IMPLICIT_MULTIPLICATION.sub("*", text)


def _normalize_math_unicode(expression: str) -> str:
    if not expression:
        return expression

    for source, target in _UNICODE_REPLACEMENTS.items():
        expression = expression.replace(source, target)

    result_chars = []
    i = 0
    while i < len(expression):
        char = expression[i]
        if char in _SUPERSCRIPT_MAP:
            superscript_tokens = []
            while i < len(expression) and expression[i] in _SUPERSCRIPT_MAP:
                superscript_tokens.append(_SUPERSCRIPT_MAP[expression[i]])
                i += 1
            result_chars.append("^" + "".join(superscript_tokens))
            continue

        result_chars.append(char)
        i += 1

    return "".join(result_chars)
