"""Human-readable rendering of coefficient vectors."""

from __future__ import annotations

from typing import List, Sequence

from .canonical import EPSILON

DEFAULT_DECIMALS = 4


def format_polynomial(coefficients: Sequence[float], decimals: int = DEFAULT_DECIMALS, epsilon: float = EPSILON) -> str:
    """Renders terms in descending degree, e.g. `x^2 - 3x + 2`.

    Coefficients are rounded to `decimals` places and terms that round below
    `epsilon` are skipped. A unit coefficient on a non-constant term omits the
    numeral. The output is accepted by `parse`.
    """
    terms: List[str] = []
    for power in range(len(coefficients) - 1, -1, -1):
        coeff = coefficients[power]
        magnitude = round(abs(coeff), decimals)
        if magnitude < epsilon:
            continue

        sign = "-" if coeff < 0 else "+"
        unit = power > 0 and abs(magnitude - 1) < epsilon
        body = _variable(power) if unit else _number(magnitude, decimals) + _variable(power)

        if not terms:
            if sign == "-":
                # -x^2 parses as (-x)^2
                terms.append("-({})".format(body) if unit and power >= 2 else "-" + body)
            else:
                terms.append(body)
        else:
            terms.append("{} {}".format(sign, body))

    if not terms:
        return "0"
    return " ".join(terms)


def _variable(power: int) -> str:
    if power == 0:
        return ""
    if power == 1:
        return "x"
    return "x^{}".format(power)


def _number(value: float, decimals: int) -> str:
    if value == int(value):
        return str(int(value))
    return "{:.{}f}".format(value, decimals).rstrip("0").rstrip(".")
