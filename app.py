import logging
import os
import sys
from urllib.parse import urlencode

import streamlit as st

sys.path.append(os.path.dirname(__file__))

from config import load_settings
from coefficients import factor_query
from term_collector import TermCollector, CoefficientError
from ui import inject_base_css, render_term_field, render_error_banner
from utils import sequence_to_frame

settings = load_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("term_input.app")

st.set_page_config(page_title="Polynomial Factoring", layout="centered")
inject_base_css()


def store_submission(sequence):
    # stand-in for the factoring step: keep the coefficients for display
    st.session_state.submitted = sequence
    logger.info("submitted coefficients %s", sequence)


# session defaults
if "collector" not in st.session_state:
    st.session_state.collector = TermCollector(
        on_submit=store_submission, min_degree=settings.min_degree, max_degree=settings.max_degree)
if "submitted" not in st.session_state:
    st.session_state.submitted = None
collector = st.session_state.collector

st.title("Polynomial Factoring")

# -------- Degree --------
degree_col, go_col = st.columns([3, 1], vertical_alignment="bottom")
with degree_col:
    degree = st.number_input("Degree", value=None, step=1.0, format="%g", key="degree")
with go_col:
    if st.button("Go", key="go"):
        st.session_state.submitted = None
        collector.check_degree(degree)

if render_error_banner(collector):
    collector.dismiss_error()
    st.rerun()

# -------- Coefficients --------
if collector.fields:
    st.caption("Leave a field blank for a zero coefficient.")
    with st.form("terms_form"):
        for field in collector.fields:
            render_term_field(field, collector.widget_key(field))
        submit = st.form_submit_button("Factor")
    if submit:
        values = {f.id: st.session_state.get(collector.widget_key(f), "") for f in collector.fields}
        try:
            collector.submit(values)
        except CoefficientError as e:
            st.session_state.submitted = None
            st.error(str(e))

if st.session_state.submitted is not None:
    sequence = st.session_state.submitted
    st.subheader("Coefficients")
    st.dataframe(sequence_to_frame(sequence), hide_index=True)
    st.caption("Factor request")
    st.code(f"{settings.factor_api_url}?{urlencode(factor_query(sequence))}")
