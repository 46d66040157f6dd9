import streamlit as st


def inject_base_css():
    st.markdown(
        """
        <style>
        /* center content and limit width */
        .block-container {
            max-width: 900px;
            padding-top: 1rem;
        }
        /* keep the x^n label next to its entry */
        div[data-testid="stHorizontalBlock"] .katex {
            font-size: 1.2em;
        }
        </style>
        """,
        unsafe_allow_html=True
    )


def render_term_field(field, key):
    """One entry row: free text input plus the x^n label (none for the constant)."""
    entry, label = st.columns([3, 1], vertical_alignment="center")
    with entry:
        st.text_input(
            f"Coefficient of {field.id}",
            key=key,
            placeholder="0",
            label_visibility="collapsed",
        )
    with label:
        if field.label is not None:
            st.latex(field.label)


def render_error_banner(collector):
    if not collector.error:
        return False
    st.error(collector.error)
    return st.button("Dismiss", key=f"{collector.key}-dismiss")
