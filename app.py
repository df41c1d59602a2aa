"""PassMeter -- Streamlit web interface."""

import streamlit as st

from passmeter import (
    CHARACTER_CLASSES,
    DEFAULT_LENGTH,
    REQUIREMENT_KEYS,
    InvalidConfiguration,
    char_breakdown,
    evaluate,
    generate_password,
)
from passmeter.history import HistoryStore, mask_password

_REQUIREMENT_LABELS = {
    "length":    "8+ characters",
    "uppercase": "Uppercase",
    "lowercase": "Lowercase",
    "numbers":   "Numbers",
    "special":   "Symbols",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Strength Meter",
    page_icon="\U0001f512",
    layout="centered",
)

if "history" not in st.session_state:
    st.session_state.history = HistoryStore()
    st.session_state.last_recorded = ""
history: HistoryStore = st.session_state.history

# ── Header ────────────────────────────────────────────────────────────────

st.title("\U0001f512 Password Strength Meter")
st.caption(
    "Check how strong a password is, or generate a new one.  \n"
    "Everything runs locally; nothing is sent over the network."
)

tab_check, tab_generate, tab_history = st.tabs(
    ["Check Password", "Generate Password", "History"]
)

# ── Check tab ──────────────────────────────────────────────────────────────

with tab_check:
    password = st.text_input(
        "Password",
        type="password",
        placeholder="Enter a password…",
        autocomplete="off",
        key="password",
    )
    st.caption(f"{len(password)} characters")

    if not password:
        st.session_state.last_recorded = ""
        st.info(evaluate("").tip)
    else:
        result = evaluate(password)
        # Only a changed value is a new check; reruns keep the existing entry.
        if password != st.session_state.last_recorded:
            history.record(password, result.level, result.score)
            st.session_state.last_recorded = password

        st.markdown(
            f"{result.icon} **Strength:** "
            f"<span style='color:{result.color.border}'>{result.level}</span>"
            f" &nbsp;·&nbsp; score {result.percentage:.0f}"
            f" &nbsp;·&nbsp; time to crack: **{result.crack_time}**",
            unsafe_allow_html=True,
        )
        st.progress(result.score / len(REQUIREMENT_KEYS))

        badges = "".join(
            f"<span style='margin-right:8px;color:"
            f"{'#22c55e' if result.requirements[key] else '#6b7280'}'>"
            f"{'✔' if result.requirements[key] else '✖'} "
            f"{_REQUIREMENT_LABELS[key]}</span>"
            for key in REQUIREMENT_KEYS
        )
        st.markdown(badges, unsafe_allow_html=True)

        if result.score == len(REQUIREMENT_KEYS):
            st.success(result.tip)
        else:
            st.warning(result.tip)

        st.markdown("**Character analysis**")
        counts = char_breakdown(password)
        for name, count in counts.items():
            st.progress(count / len(password), text=f"{name.capitalize()}: {count}")

# ── Generate tab ───────────────────────────────────────────────────────────

with tab_generate:
    col1, col2 = st.columns(2)
    with col1:
        length = st.slider("Length", 4, 64, DEFAULT_LENGTH, key="length")
    with col2:
        selected = {
            name for name in CHARACTER_CLASSES
            if st.checkbox(name.capitalize(), value=True, key=f"class_{name}")
        }

    if st.button("Generate password", type="primary", key="generate"):
        try:
            pwd = generate_password(length, selected)
        except InvalidConfiguration as exc:
            st.error(f"{exc}!")
        else:
            st.code(pwd, language=None)
            st.toast("Password generated!")

# ── History tab ────────────────────────────────────────────────────────────

with tab_history:
    entries = history.list()
    if not entries:
        st.caption("No history yet. Check passwords to see them here.")
    else:
        for entry in entries:
            st.markdown(
                f"`{mask_password(entry.password)}` &nbsp; "
                f"**{entry.level}** &nbsp; {entry.score}/5 &nbsp; "
                f"<small>{entry.timestamp:%H:%M:%S}</small>",
                unsafe_allow_html=True,
            )
        if st.button("Clear history", key="clear_history"):
            history.clear()
            st.toast("History cleared!")
            st.rerun()
