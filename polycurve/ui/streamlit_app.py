"""Streamlit frontend for drawing polynomial curves."""

from __future__ import annotations

from typing import List

import matplotlib.pyplot as plt
import streamlit as st

from polycurve.curves import (
    COLOR_OPTIONS,
    PRESET_POLYNOMIALS,
    CurveState,
    add_curve,
    recolor,
    remove_curve,
    toggle_visibility,
    update_curve,
)
from polycurve.engine import PolynomialError, format_polynomial, roots
from polycurve.tools.plotter import Viewport, build_figure

PAGE_TITLE = "Ilustrador de Equacoes"


def _init_session() -> None:
    """Seeds session state with one parabola and a default viewport."""
    if "curves" not in st.session_state:
        st.session_state.curves = add_curve([], "x^2")
    if "viewport" not in st.session_state:
        st.session_state.viewport = Viewport(width=900, height=600)


def _render_curve_editor(curve: CurveState) -> None:
    """Renders inputs for one curve and stores edits back into session state.

    Args:
        curve: Curve being edited.
    """
    curve_id = curve["curve_id"]
    cols = st.columns([6, 2, 1, 1])
    expression = cols[0].text_input("f(x)", value=curve["expression"], key="expr-" + curve_id)
    if expression != curve["expression"]:
        st.session_state.curves = update_curve(st.session_state.curves, curve_id, expression)

    names = [option["name"] for option in COLOR_OPTIONS]
    values = [option["value"] for option in COLOR_OPTIONS]
    current = values.index(curve["color"]) if curve["color"] in values else 0
    chosen = cols[1].selectbox("Cor", names, index=current, key="color-" + curve_id)
    if values[names.index(chosen)] != curve["color"]:
        _replace_curve(recolor(curve, values[names.index(chosen)]))

    if cols[2].button("👁" if curve.get("visible", True) else "○", key="vis-" + curve_id):
        _replace_curve(toggle_visibility(curve))
    if cols[3].button("✕", key="del-" + curve_id):
        st.session_state.curves = remove_curve(st.session_state.curves, curve_id)
        st.rerun()

    latest = _find_curve(curve_id)
    if latest is not None and not latest.get("valid", True):
        st.caption(":red[Expressao invalida: mantendo a ultima curva valida.]")
    elif latest is not None:
        found = roots(latest["coefficients"])
        summary = format_polynomial(latest["coefficients"])
        if found:
            summary += "  |  raizes: " + ", ".join("{:.4g}".format(r) for r in found)
        st.caption(summary)


def _find_curve(curve_id: str):
    for curve in st.session_state.curves:
        if curve["curve_id"] == curve_id:
            return curve
    return None


def _replace_curve(updated: CurveState) -> None:
    curves: List[CurveState] = st.session_state.curves
    st.session_state.curves = [updated if c["curve_id"] == updated["curve_id"] else c for c in curves]


def _render_viewport_controls() -> None:
    viewport: Viewport = st.session_state.viewport
    cols = st.columns(7)
    if cols[0].button("+", help="Zoom in"):
        viewport = viewport.zoomed_in()
    if cols[1].button("−", help="Zoom out"):
        viewport = viewport.zoomed_out()
    if cols[2].button("←"):
        viewport = viewport.panned(50, 0)
    if cols[3].button("→"):
        viewport = viewport.panned(-50, 0)
    if cols[4].button("↑"):
        viewport = viewport.panned(0, 50)
    if cols[5].button("↓"):
        viewport = viewport.panned(0, -50)
    if cols[6].button("Resetar"):
        viewport = viewport.reset()
    st.session_state.viewport = viewport
    st.caption("Zoom: {:.0f}%".format(viewport.zoom * 100))


def main() -> None:
    """Runs the Streamlit app lifecycle."""
    st.set_page_config(page_title=PAGE_TITLE, page_icon="ƒ", layout="wide")
    _init_session()
    st.title(PAGE_TITLE)

    with st.sidebar:
        st.header("Curvas")
        for curve in list(st.session_state.curves):
            _render_curve_editor(curve)

        new_expression = st.text_input("Nova curva", placeholder="Ex.: (x+1)^2*(x-1) - 3x")
        preset = st.selectbox("Exemplos", ["-"] + [p["name"] for p in PRESET_POLYNOMIALS])
        if st.button("Adicionar", type="primary", use_container_width=True):
            expression = new_expression
            if preset != "-":
                expression = next(p["expression"] for p in PRESET_POLYNOMIALS if p["name"] == preset)
            try:
                st.session_state.curves = add_curve(st.session_state.curves, expression)
                st.rerun()
            except PolynomialError as exc:
                st.error(str(exc))

    _render_viewport_controls()
    fig = build_figure(st.session_state.curves, st.session_state.viewport)
    st.pyplot(fig)
    plt.close(fig)


if __name__ == "__main__":
    main()
