# app.py
# ------------------------------------------------------------
# tidyname options page (Streamlit)
# ------------------------------------------------------------
# Toggle automatic renaming and review the most recent renames.
# Reads and writes the same state file as the CLI and server.
# ------------------------------------------------------------

import html
import streamlit as st
from dotenv import load_dotenv

from tidyname import session

load_dotenv()

# ==== Page ====
st.set_page_config(page_title="tidyname", page_icon="🧹", layout="centered")

st.title("🧹 tidyname")
st.caption("Downloads named like `a1b2c3d4e5f6.jpg` get a readable name built from the page they came from.")

# ==== Enabled flag ====
enabled = st.toggle("Rename downloads automatically", value=session.is_enabled())
if enabled != session.is_enabled():
    session.set_enabled(enabled)
    st.toast("Saved")

st.divider()

# ==== History ====
st.subheader("Recent renames")

history = session.load_history()
if not history:
    st.write("Nothing renamed yet.")
else:
    rows = []
    for h in history:
        original = html.escape(str(h.get("original", "")).split("/")[-1])
        renamed = html.escape(str(h.get("renamed", "")))
        rows.append(
            f'<div class="item"><span style="text-decoration:line-through; opacity:0.6">{original}</span>'
            f" <b>→ {renamed}</b></div>"
        )
    st.markdown("\n".join(rows), unsafe_allow_html=True)
    if st.button("Clear history"):
        session.clear_history()
        st.rerun()
