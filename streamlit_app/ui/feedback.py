"""
Standardized feedback utilities for errors, notices and loading states.

Provides reusable components for displaying form errors, search notices
(toasts) and the loading indicator in a consistent manner.
"""

from contextlib import contextmanager
from typing import Dict, Optional

import streamlit as st

from recipe_search.search import NOTICE_SUCCESS, Notice


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_form_errors(errors: Dict[str, str]) -> None:
    """
    Display per-field validation errors.

    Args:
        errors: Mapping of form field name to error message
    """
    labels = {
        "items": "Allergies",
        "diets": "Diet Preferences",
        "cook_time": "Max Cook Time",
    }
    for name, message in errors.items():
        show_error(f"{labels.get(name, name)}: {message}")


def show_notice(notice: Optional[Notice]) -> None:
    """
    Show a transient toast for a completed search.

    Args:
        notice: Notice from the search state (None shows nothing)
    """
    if notice is None:
        return
    if notice.kind == NOTICE_SUCCESS:
        st.toast(f"**{notice.title}** {notice.message}", icon="✅")
    else:
        st.toast(f"**{notice.title}** {notice.message}", icon="⚠️")


def show_raw_response(notice: Optional[Notice]) -> None:
    """
    Render the raw API response of the last successful search for inspection.

    Args:
        notice: Notice from the search state; only success notices carry a payload
    """
    if notice is None or notice.kind != NOTICE_SUCCESS or notice.payload is None:
        return
    with st.expander(notice.title, expanded=False):
        st.json(notice.payload, expanded=False)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Finding recipes…"):
            # Do work here
            pass

    Args:
        label: Spinner label text (default: "Working…")
    """
    with st.spinner(label):
        yield
