"""Curve palette and example expressions."""

from __future__ import annotations

from typing import Dict, List

GRAPH_COLORS: List[str] = [
    "#000000",
    "#2563eb",
    "#dc2626",
    "#16a34a",
    "#9333ea",
    "#ea580c",
]

COLOR_OPTIONS: List[Dict[str, str]] = [
    {"name": "Black", "value": "#000000"},
    {"name": "Blue", "value": "#2563eb"},
    {"name": "Red", "value": "#dc2626"},
    {"name": "Green", "value": "#16a34a"},
    {"name": "Purple", "value": "#9333ea"},
    {"name": "Orange", "value": "#ea580c"},
    {"name": "Pink", "value": "#db2777"},
    {"name": "Teal", "value": "#0d9488"},
]

PRESET_POLYNOMIALS: List[Dict[str, str]] = [
    {"name": "Linear", "expression": "x"},
    {"name": "Quadratic", "expression": "x^2"},
    {"name": "Cubic", "expression": "x^3"},
    {"name": "Parabola", "expression": "x^2 - 4"},
    {"name": "S-curve", "expression": "x^3 - 3*x"},
    {"name": "Quartic", "expression": "x^4 - 5*x^2 + 4"},
    {"name": "(x+1)(x-2)", "expression": "(x+1)*(x-2)"},
    {"name": "(x+2)(x-1)(x-3)", "expression": "(x+2)*(x-1)*(x-3)"},
    {"name": "(x+1)^2", "expression": "(x+1)^2"},
    {"name": "(x-2)^3", "expression": "(x-2)^3"},
    {"name": "(x^2+1)(x-1)", "expression": "(x^2+1)*(x-1)"},
    {"name": "(x+1)^2*(x-1)", "expression": "(x+1)^2*(x-1)"},
    {"name": "x(x-1)(x-2)(x-3)", "expression": "x*(x-1)*(x-2)*(x-3)"},
]


def color_for_index(index: int) -> str:
    return GRAPH_COLORS[index % len(GRAPH_COLORS)]
