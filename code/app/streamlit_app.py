# streamlit_app.py
import os
import sys

import streamlit as st

# Ensure the code/ directory is on sys.path so `app` and `fra` import when Streamlit runs this file.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.core.charts import leverage_chart, liquidity_chart  # noqa: E402
from app.core.config import FRA_DATA_PATH, SUPPORTED_LOCALES, configure_logging, resolve_locale  # noqa: E402
from app.core.form import FIGURE_FIELDS, TRACKED_FIELDS, FormController  # noqa: E402
from app.core.labels import text  # noqa: E402
from app.core.pipeline import TABLE_COLUMNS, build_rows  # noqa: E402
from fra.errors import FormValidationError  # noqa: E402
from fra.store import JsonFileStorage, RecordStore  # noqa: E402

configure_logging()

st.set_page_config(page_title="FRA", layout="wide")

if "locale" not in st.session_state:
    st.session_state.locale = resolve_locale()

if "form" not in st.session_state:
    st.session_state.form = FormController(RecordStore(JsonFileStorage(FRA_DATA_PATH)), st.session_state.locale)
    st.session_state.pending_delete = None
    st.session_state.flash = None
    st.session_state.form.load_initial()
    st.session_state.widgets_synced = False

form: FormController = st.session_state.form
locale = st.session_state.locale


def _widget_key(field: str) -> str:
    return f"field_{field}"


def _sync_widgets():
    # push controller state into widget state; only safe before widgets render
    for field in TRACKED_FIELDS:
        value = form.fields.get(field, "")
        st.session_state[_widget_key(field)] = "" if value in (None, "") else str(value)


def _on_field_change(field: str):
    form.update_field(field, st.session_state[_widget_key(field)])


def _on_submit():
    for field in TRACKED_FIELDS:
        form.fields[field] = st.session_state[_widget_key(field)]
    try:
        form.submit()
    except FormValidationError as exc:
        st.session_state.flash = ("error", exc.message)
        return
    st.session_state.flash = ("success", text("saved", locale))


def _on_reset():
    form.reset()
    _sync_widgets()


def _on_edit(record_id: str):
    form.edit(record_id)
    st.session_state.pending_delete = None
    _sync_widgets()


def _on_delete_request(record_id: str):
    st.session_state.pending_delete = record_id


def _on_delete_confirm(record_id: str):
    form.delete(record_id)
    st.session_state.pending_delete = None
    _sync_widgets()


def _on_delete_cancel():
    st.session_state.pending_delete = None


def _on_locale_change():
    st.session_state.locale = st.session_state.locale_select
    form.locale = st.session_state.locale_select


if not st.session_state.widgets_synced:
    _sync_widgets()
    st.session_state.widgets_synced = True

with st.sidebar:
    st.selectbox(
        "Language",
        SUPPORTED_LOCALES,
        index=SUPPORTED_LOCALES.index(locale),
        key="locale_select",
        on_change=_on_locale_change,
    )
    st.caption(FRA_DATA_PATH)

st.title(text("title", locale))

# --- Form -------------------------------------------------------------------
left, right = st.columns([2, 3])
with left:
    st.text_input(text("name", locale), key=_widget_key("name"), on_change=_on_field_change, args=("name",))
    for field in FIGURE_FIELDS:
        st.text_input(text(field, locale), key=_widget_key(field), on_change=_on_field_change, args=(field,))
    save_col, reset_col = st.columns(2)
    save_col.button(text("save", locale), type="primary", on_click=_on_submit, use_container_width=True)
    reset_col.button(text("reset", locale), on_click=_on_reset, use_container_width=True)

    if st.session_state.flash:
        kind, message = st.session_state.flash
        if kind == "error":
            st.error(message)
        else:
            st.success(message)
        st.session_state.flash = None

view = form.derived()
with right:
    m1, m2 = st.columns(2)
    m1.metric(text("current_ratio", locale), f"{view.current_ratio}%")
    m2.metric(text("debt_ratio", locale), f"{view.debt_ratio}%")
    c1, c2 = st.columns(2)
    c1.plotly_chart(liquidity_chart(view.liquidity_series, locale), use_container_width=True)
    c2.plotly_chart(leverage_chart(view.leverage_series, locale), use_container_width=True)

# --- Records table ------------------------------------------------------------
st.subheader(text("records", locale))
rows = build_rows(form.store.list(), locale)
if not rows:
    st.info(text("empty", locale))
else:
    widths = [2, 1, 1, 1, 1, 1, 1, 2, 1, 1, 2]
    for col, key in zip(st.columns(widths), TABLE_COLUMNS):
        col.markdown(f"**{text(key, locale)}**")
    for row in rows:
        cols = st.columns(widths)
        values = [
            row.name, row.current_assets, row.current_liabilities, row.total_debt, row.equity,
            row.current_ratio, row.debt_ratio, row.decision, row.short_term, row.long_term,
        ]
        for col, value in zip(cols, values):
            # plain text, so user-entered names are never read as markdown
            col.text(value)
        with cols[-1]:
            if st.session_state.pending_delete == row.id:
                st.caption(text("confirm_delete", locale))
                a, b = st.columns(2)
                a.button(text("delete", locale), key=f"confirm_{row.id}", type="primary",
                         on_click=_on_delete_confirm, args=(row.id,))
                b.button(text("cancel", locale), key=f"cancel_{row.id}", on_click=_on_delete_cancel)
            else:
                a, b = st.columns(2)
                a.button(text("edit", locale), key=f"edit_{row.id}", on_click=_on_edit, args=(row.id,))
                b.button(text("delete", locale), key=f"delete_{row.id}", on_click=_on_delete_request, args=(row.id,))
