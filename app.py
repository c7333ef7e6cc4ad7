"""PassGen -- Streamlit web interface."""

import streamlit as st

from passgen.controller import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH, PasswordForm

# ── Tier colours ──────────────────────────────────────────────────────────

TIER_COLORS = {
    "neutral": "#9e9e9e",
    "critical": "#ef4444",
    "caution": "#f97316",
    "good": "#f59e0b",
    "excellent": "#10b981",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

st.title("Password Generator")

if "form" not in st.session_state:
    st.session_state.form = PasswordForm()
form: PasswordForm = st.session_state.form

# ── Length slider & actions ───────────────────────────────────────────────

length = st.slider(
    "Password Length",
    MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH,
    step=1,
    key="length",
)
form.set_length(length)

if st.button("Generate Password", type="primary", use_container_width=True):
    form.generate()

col_pwd, col_vis, col_copy = st.columns([6, 1, 1])
with col_vis:
    if st.button("Hide" if form.state.visible else "Show", help="Show or hide the password"):
        form.toggle_visibility()
with col_copy:
    if st.button("Copy", help="Copy password"):
        note = form.copy()
        if note.ok:
            st.toast(note.message, icon="✅")
        else:
            st.error(note.message)
with col_pwd:
    st.text_input(
        "Generated Password",
        value=form.displayed_password,
        disabled=True,
        label_visibility="collapsed",
    )

# ── Strength meter & checklist ────────────────────────────────────────────

result = form.strength
color = TIER_COLORS[result.tier]

st.progress(int(result.percent))
st.markdown(
    f"<span style='color:{color}'><strong>{result.label}</strong></span>. Must contain:",
    unsafe_allow_html=True,
)

for req in result.requirements:
    if req.met:
        st.markdown(f":green[✔ {req.description}]")
    else:
        st.markdown(f":gray[✖ {req.description}]")
