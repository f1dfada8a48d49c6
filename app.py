import logging

import streamlit as st

from config import APP, RUNTIME
from controller import PageState, submit_prediction
from patient import FIELDS
from presenter import render_results

logging.basicConfig(level=getattr(logging, RUNTIME["log_level"], logging.INFO))
logger = logging.getLogger(__name__)

st.set_page_config(page_title=APP["title"], page_icon="🩺", layout="centered")

# -------------------------
# Session state
# -------------------------
if "page" not in st.session_state:
    st.session_state["page"] = PageState()

page: PageState = st.session_state["page"]


# -------------------------
# Helpers
# -------------------------
def _field_key(name: str) -> str:
    return f"field_{name}"


def _notify(title: str, description: str, severity: str) -> None:
    # Queued so a notice survives the rerun that ends every submit
    st.session_state.setdefault("notices", []).append((title, description, severity))


def _show_notices() -> None:
    for title, description, severity in st.session_state.pop("notices", []):
        if severity == "destructive":
            st.error(f"**{title}:** {description}")
            st.toast(f"{title}: {description}", icon="🚨")
        else:
            st.toast(f"{title}: {description}", icon="✅")


def _submitting() -> bool:
    return bool(st.session_state.get("submitting", False))


def _start_submit() -> None:
    # Callbacks run before the script, so this run already draws the button disabled
    st.session_state["submitting"] = True


def reset_page() -> None:
    page.reset()
    for f in FIELDS:
        st.session_state.pop(_field_key(f.name), None)


# -------------------------
# Header
# -------------------------
st.title(f"🩺 {APP['title']}")
st.caption(APP["subtitle"])

pill_cols = st.columns(len(APP["pills"]))
for col, pill in zip(pill_cols, APP["pills"]):
    with col:
        st.markdown(f"**{pill}**")

_show_notices()

# -------------------------
# Input form / results
# -------------------------
if not page.has_result:
    st.subheader(APP["form_title"])
    st.caption(APP["form_caption"])

    with st.form("patient_form"):
        col_a, col_b = st.columns(2)
        for i, f in enumerate(FIELDS):
            with (col_a if i % 2 == 0 else col_b):
                st.text_input(
                    f"{f.label} *" if f.required else f.label,
                    key=_field_key(f.name),
                    placeholder=f.placeholder,
                )

        # Disabled for the whole run that does the scoring
        st.form_submit_button(
            APP["submit_label"],
            on_click=_start_submit,
            disabled=_submitting(),
            width="stretch",
        )

    if _submitting():
        values = {f.name: st.session_state.get(_field_key(f.name), "") for f in FIELDS}
        try:
            with st.spinner(APP["busy_label"]):
                submit_prediction(page, values, _notify)
        finally:
            st.session_state["submitting"] = False
        # Redraw with the button enabled again (or the results view)
        st.rerun()
else:
    render_results(page.result)
    st.button(APP["reset_label"], on_click=reset_page, width="stretch")

# -------------------------
# Info + footer
# -------------------------
st.divider()
info_cols = st.columns(len(APP["info_cards"]))
for col, (heading, text) in zip(info_cols, APP["info_cards"]):
    with col:
        with st.container(border=True):
            st.markdown(f"**{heading}**")
            st.caption(text)

st.divider()
st.caption(APP["disclaimer"])
