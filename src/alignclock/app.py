"""Lumoria & Tempora: Streamlit app for the alignment and clock reports."""

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from alignclock.alignment import (  # noqa: E402
    animate_shadows,
    classify,
    create_star_system,
    sort_by_distance,
)
from alignclock.clocks import TimeFormatError, parse_time, synchronize  # noqa: E402
from alignclock.config import load_settings  # noqa: E402
from alignclock.i18n import t  # noqa: E402
from alignclock.renderers.plotly_2d import render_shadow_animation  # noqa: E402
from alignclock.renderers.svg_2d import generate_alignment_svg  # noqa: E402
from alignclock.renderers.text import render_celestial_report, render_clock_report  # noqa: E402
from alignclock.samples import (  # noqa: E402
    ALTARIS_STAR,
    GRAND_CLOCK_TIME,
    LUMORIA_PLANETS,
    LUMORIA_STAR,
    LUMORIA_SYSTEM_NAME,
    TOWN_CLOCK_TIMES,
)

_settings = load_settings(dotenv=False)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", _settings.lang)

st.set_page_config(page_title=t("page_title", _lang), page_icon="✦", layout="wide")

# --- Session state initialization ---

if "reference" not in st.session_state:
    st.session_state.reference = GRAND_CLOCK_TIME
if "readings" not in st.session_state:
    st.session_state.readings = "\n".join(TOWN_CLOCK_TIMES)
if "clock_report" not in st.session_state:
    st.session_state.clock_report = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

st.title(t("page_title", _lang))
tab_align, tab_clocks = st.tabs([t("tab_alignment", _lang), t("tab_clocks", _lang)])

with tab_align:
    planets = sort_by_distance(LUMORIA_PLANETS)
    results = classify(planets)
    svg = generate_alignment_svg(
        planets, _settings.svg_width, _settings.svg_height, classifications=results
    )
    components.html(svg, height=_settings.svg_height + 20, scrolling=False)
    st.plotly_chart(
        render_shadow_animation(animate_shadows(planets, LUMORIA_STAR), LUMORIA_STAR),
        use_container_width=False,
        config={"displayModeBar": False},
    )
    st.table(
        [
            {t("report_planet", _lang): r.name, t("report_light", _lang): r.light}
            for r in results
        ]
    )
    system = create_star_system(LUMORIA_SYSTEM_NAME, [LUMORIA_STAR, ALTARIS_STAR], planets)
    st.code(render_celestial_report(system, lang=_lang), language=None)

with tab_clocks:
    col1, col2 = st.columns([1, 2])
    with col1:
        reference = st.text_input(t("label_reference", _lang), value=st.session_state.reference)
    with col2:
        readings_text = st.text_area(t("label_readings", _lang), value=st.session_state.readings)
    submitted = st.button(t("btn_analyze", _lang), key="analyze_btn")

    if submitted:
        st.session_state.reference = reference
        st.session_state.readings = readings_text
        st.session_state.error_msg = None
        try:
            parse_time(reference)
        except TimeFormatError as e:
            st.session_state.clock_report = None
            st.session_state.error_msg = str(e)
        else:
            readings = [line.strip() for line in readings_text.splitlines() if line.strip()]
            st.session_state.clock_report = synchronize(reference, readings)

    if st.session_state.error_msg:
        st.error(st.session_state.error_msg)
    if st.session_state.clock_report is not None:
        st.code(render_clock_report(st.session_state.clock_report, lang=_lang), language=None)
