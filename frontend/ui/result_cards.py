"""Reusable Streamlit widgets for codec results."""

from typing import Any, Dict, Sequence

import streamlit as st


def result_card(row: Dict[str, Any]) -> None:
    with st.container(border=True):
        st.markdown(f"**{row['label']}**")
        st.caption("Value")
        if not row["ok"]:
            st.error(row["result"])
        elif row["result"]:
            # st.code ships its own copy-to-clipboard button
            st.code(row["result"], language=None, wrap_lines=True)
        else:
            st.caption("Empty")


def result_grid(rows: Sequence[Dict[str, Any]], columns: int = 4) -> None:
    for start in range(0, len(rows), columns):
        cols = st.columns(columns)
        for col, row in zip(cols, rows[start:start + columns]):
            with col:
                result_card(row)
