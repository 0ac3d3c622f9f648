# -----------------------------------------------
# ⏱️ Work Hours Calculator (Streamlit)
# -----------------------------------------------
# Requires: streamlit, sqlmodel, pandas
# Entries live only in the browser session; reloading the page starts empty.

import os

import streamlit as st

from domain import EntryDraft
from repository import EntryEditor, WorkEntryRepository
from services import InvalidTimeError, format_hours
from utils import entries_to_dataframe, totals_for_display

# =========================
# Global parameters
# =========================
APP_TITLE = "Work Hours Calculator"
DEFAULT_BREAK = "00:30"
# overnight shifts clamp to 0 h unless explicitly enabled
WRAP_OVERNIGHT = os.getenv("WORKHOURS_WRAP_OVERNIGHT", "0") == "1"

ADD_FORM_KEYS = ("new_date", "new_start", "new_end", "new_break")

st.set_page_config(page_title=APP_TITLE, page_icon="⏱️", layout="centered")
st.title(f"⏱️ {APP_TITLE}")

# =========================
# Session state helpers
# =========================
def get_repo() -> WorkEntryRepository:
    if "repo" not in st.session_state:
        st.session_state["repo"] = WorkEntryRepository(wrap_overnight=WRAP_OVERNIGHT)
    return st.session_state["repo"]

def get_editor() -> EntryEditor:
    if "editor" not in st.session_state:
        st.session_state["editor"] = EntryEditor(get_repo())
    return st.session_state["editor"]

def _init_add_form_defaults():
    if st.session_state.get("_reset_add_form", False):
        for k in ADD_FORM_KEYS:
            st.session_state.pop(k, None)
        st.session_state["_reset_add_form"] = False
    st.session_state.setdefault("new_break", DEFAULT_BREAK)

def _flash_success_if_any():
    msg = st.session_state.pop("_flash_success", None)
    if msg:
        st.success(msg)

repo = get_repo()
editor = get_editor()

# =========================
# ➕ Add entry
# =========================
st.subheader("➕ Add entry")
_flash_success_if_any()
_init_add_form_defaults()

c1, c2, c3, c4 = st.columns(4)
c1.text_input("Date", key="new_date", placeholder="YYYY-MM-DD")
c2.text_input("Start Time", key="new_start", placeholder="HH:MM")
c3.text_input("End Time", key="new_end", placeholder="HH:MM")
c4.text_input("Break Hours", key="new_break", placeholder="HH:MM")

if st.button("Add Entry", key="add_entry", use_container_width=True):
    draft = EntryDraft(
        date=st.session_state.get("new_date", ""),
        start_time=st.session_state.get("new_start", ""),
        end_time=st.session_state.get("new_end", ""),
        break_duration=st.session_state.get("new_break", ""),
    )
    try:
        entry = repo.add(draft)
    except InvalidTimeError:
        st.warning("Enter times as HH:MM.")
    else:
        st.session_state["_reset_add_form"] = True
        st.session_state["_flash_success"] = (
            f"Saved {entry.date or 'entry'}: {format_hours(entry.hours_worked)} "
            f"· {entry.quarter_hours_worked} quarter hours"
        )
        st.rerun()

# =========================
# ✏️ Edit dialog
# =========================
@st.dialog("Edit Entry")
def edit_entry_dialog(entry_id: int):
    entry = editor.begin(entry_id)
    if entry is None:
        st.info("This entry no longer exists.")
        return
    date_v = st.text_input("Date", value=entry.date, key=f"edit_date_{entry_id}")
    start_v = st.text_input("Start Time", value=entry.start_time, key=f"edit_start_{entry_id}")
    end_v = st.text_input("End Time", value=entry.end_time, key=f"edit_end_{entry_id}")
    break_v = st.text_input("Break Hours", value=entry.break_duration, key=f"edit_break_{entry_id}")

    save_col, delete_col = st.columns(2)
    if save_col.button("Save Changes", key=f"save_{entry_id}", use_container_width=True):
        try:
            editor.save(EntryDraft(date=date_v, start_time=start_v, end_time=end_v, break_duration=break_v))
        except InvalidTimeError:
            st.warning("Enter times as HH:MM.")
        else:
            st.rerun()
    if delete_col.button("🗑️ Delete", key=f"delete_{entry_id}", type="primary", use_container_width=True):
        editor.delete()
        st.rerun()

# =========================
# 🗓️ Work entries
# =========================
st.subheader("🗓️ Work Entries")
entries = repo.list_all()
if not entries:
    st.info("No entries yet.")
else:
    df = entries_to_dataframe(entries)
    st.dataframe(df.drop(columns=["ID"]), use_container_width=True, hide_index=True)

    labels = {e.id: f"{e.date or '—'} · {e.start_time}–{e.end_time}" for e in entries}
    sel_col, btn_col = st.columns([3, 1])
    to_edit = sel_col.selectbox(
        "Entry", options=list(labels), format_func=labels.get,
        key="edit_target", label_visibility="collapsed",
    )
    if btn_col.button("✏️ Edit", key="open_editor", use_container_width=True):
        edit_entry_dialog(to_edit)

# =========================
# 📊 Totals
# =========================
cards = totals_for_display(repo.totals())
for col, (label, value) in zip(st.columns(3), cards.items()):
    col.metric(label, value)
