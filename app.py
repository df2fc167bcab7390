import streamlit as st

from growthsim.config import (
    apply_api_keys,
    configure_logging,
    get_image_reader,
    get_insight_generator,
    get_metrics_extractor,
    load_api_keys,
    load_settings,
    save_api_keys,
)
from growthsim.ingest.parser import build_input_source, manual_source
from growthsim.insights.prompts import DEFAULT_ROLE, load_roles
from growthsim.models.profile import UserProfile
from growthsim.pipeline import AnalysisError, analyze_profile
from growthsim.scoring.calculator import calculate_scores
from growthsim.scoring.simulator import Simulation
from growthsim.storage.profile_store import ProfileStore
from growthsim.ui_state import clear_upload_flags, import_key, prune_upload_flags, upload_key

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Career Growth Simulator",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}

:root {
    --slate: #0f172a;
    --blue: #2563eb;
    --muted: #64748b;
}

.hero-title { font-size: 2.6rem; font-weight: 900; color: var(--slate); margin-bottom: 0; }
.hero-tagline { color: var(--muted); font-size: 1.05rem; margin-top: 0.2rem; }
.score-big { font-size: 4.5rem; font-weight: 900; color: var(--blue); line-height: 1; }
.score-caption { color: var(--muted); text-transform: uppercase; letter-spacing: 0.3em; font-size: 0.7rem; }
</style>
""", unsafe_allow_html=True)

# ---------------------------------------------------------------------------
# Settings, logging, keys
# ---------------------------------------------------------------------------
_stored_keys = load_api_keys()
apply_api_keys(_stored_keys)
settings = load_settings()
configure_logging(settings)

ROLES = load_roles()

# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
_DEFAULTS = {
    "profile": UserProfile(),
    "target_role": DEFAULT_ROLE,
    "insights": None,
    "simulation": None,
    "persist_mode": False,
}
for k, v in _DEFAULTS.items():
    if k not in st.session_state:
        st.session_state[k] = v

store = ProfileStore()

if not st.session_state.profile.has_sources and st.session_state.profile.detected_metrics is None \
        and store.is_persisted():
    loaded = store.load_profile()
    if loaded:
        st.session_state.profile, role = loaded
        st.session_state.target_role = role or DEFAULT_ROLE
        st.session_state.persist_mode = True


def _persist() -> None:
    if st.session_state.persist_mode:
        store.save_profile(st.session_state.profile, st.session_state.target_role)


def _reset_session() -> None:
    for key, value in _DEFAULTS.items():
        st.session_state[key] = UserProfile() if key == "profile" else value
    clear_upload_flags(st.session_state)
    for widget_key in ("source_upload", "import_profile"):
        st.session_state.pop(widget_key, None)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
st.markdown(
    '<p class="hero-title">Career Growth Simulator</p>'
    '<p class="hero-tagline">Readiness score, AI coaching and what-if planning for your next role.</p>',
    unsafe_allow_html=True,
)

# ---------------------------------------------------------------------------
# Sidebar: privacy + API key
# ---------------------------------------------------------------------------
with st.sidebar:
    st.markdown("### Privacy")
    mode_label = "Saved locally" if st.session_state.persist_mode else "Ephemeral (lost on close)"
    st.caption(f"**Mode:** {mode_label}")
    new_persist = st.toggle("Remember my profile on this device",
                            value=st.session_state.persist_mode,
                            help="Saves name, education and detected metrics. Document text is never saved.")
    if new_persist != st.session_state.persist_mode:
        st.session_state.persist_mode = new_persist
        _persist()
        st.rerun()
    if st.button("Delete all local data"):
        store.delete_all()
        _reset_session()
        st.success("All cleared.")
        st.rerun()

    with st.expander("Import / Export"):
        export_data = store.export_profile()
        if export_data:
            st.download_button("Download profile JSON", export_data, "profile.json", "application/json")
        uploaded_profile = st.file_uploader("Import profile JSON", type=["json"], key="import_profile")
        if uploaded_profile:
            imported_key = import_key(uploaded_profile.name, uploaded_profile.size)
            if imported_key not in st.session_state:
                st.session_state[imported_key] = True
                content = uploaded_profile.read().decode("utf-8", errors="replace")
                if store.import_profile(content):
                    loaded = store.load_profile()
                    if loaded:
                        st.session_state.profile, role = loaded
                        st.session_state.target_role = role or DEFAULT_ROLE
                        st.session_state.insights = None
                        st.session_state.simulation = None
                        st.session_state.persist_mode = True
                        st.rerun()
                else:
                    st.error("That file is not a saved profile.")

    st.markdown("---")
    st.markdown("### Gemini API key")
    st.caption("Without a key, metrics are detected offline and the AI coach is disabled.")
    gemini_key = st.text_input("Gemini API Key", value=_stored_keys.get("GEMINI_API_KEY", ""),
                               type="password", key="gemini_key_input")
    if st.button("Save API key"):
        new_keys = {"GEMINI_API_KEY": gemini_key} if gemini_key else {}
        save_api_keys(new_keys)
        apply_api_keys(new_keys)
        st.success("Key saved locally and activated.")
        st.rerun()

# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------
tab_profile, tab_dashboard, tab_coach, tab_sim = st.tabs(
    ["Profile", "Dashboard", "AI Coach", "Simulator"]
)

profile: UserProfile = st.session_state.profile

# ===== TAB 1: Profile input =====
with tab_profile:
    col_id, col_role = st.columns([3, 2])
    with col_id:
        name = st.text_input("Candidate name", value=profile.name)
        education = st.text_input("Current status / education", value=profile.education,
                                  placeholder="e.g. BSc Computer Science, 3rd year")
    with col_role:
        role_index = ROLES.index(st.session_state.target_role) if st.session_state.target_role in ROLES else 0
        st.session_state.target_role = st.selectbox("Target role", ROLES, index=role_index)

    if name != profile.name or education != profile.education:
        profile.name = name
        profile.education = education
        st.session_state.simulation = None
        _persist()

    st.markdown("#### Evidence")
    uploaded_files = st.file_uploader(
        "Upload CVs, transcripts or certificates (PDF, DOCX, TXT, HTML, images)",
        type=["pdf", "docx", "txt", "md", "html", "htm", "png", "jpg", "jpeg", "webp"],
        accept_multiple_files=True,
        key="source_upload",
    )
    prune_upload_flags(st.session_state,
                       [upload_key(f.name, f.size) for f in uploaded_files or []])
    if uploaded_files:
        image_reader = get_image_reader(settings)
        for uploaded_file in uploaded_files:
            file_key = upload_key(uploaded_file.name, uploaded_file.size)
            if file_key in st.session_state:
                continue
            with st.spinner(f"Scanning **{uploaded_file.name}**..."):
                try:
                    source = build_input_source(uploaded_file.name, uploaded_file.read(), image_reader)
                    profile.add_source(source)
                    st.session_state[file_key] = True
                except Exception as e:
                    st.error(f"Document processing failed for {uploaded_file.name}: {e}")

    with st.expander("Add text manually"):
        manual_label = st.text_input("Label", value="Manual entry", key="manual_label")
        manual_text = st.text_area("Paste skills, projects, experience...", key="manual_text", height=160)
        if st.button("Add text"):
            try:
                profile.add_source(manual_source(manual_label, manual_text))
                st.rerun()
            except ValueError as e:
                st.error(str(e))

    for idx, src in enumerate(profile.input_sources):
        col_a, col_b = st.columns([6, 1])
        with col_a:
            st.caption(f"**{src.label}** ({src.type}, {len(src.content):,} chars)")
        with col_b:
            if st.button("Remove", key=f"remove_{idx}"):
                profile.remove_source(idx)
                st.rerun()

    if st.button("Analyze profile", type="primary", disabled=not profile.has_sources):
        with st.spinner("Reasoning over profile context..."):
            try:
                result = analyze_profile(
                    profile,
                    st.session_state.target_role,
                    get_metrics_extractor(settings),
                    get_insight_generator(settings),
                )
                st.session_state.profile = result.profile
                st.session_state.insights = result.insights
                st.session_state.simulation = Simulation(result.profile)
                _persist()
                st.success("Analysis complete. Open the **Dashboard** tab.")
            except AnalysisError as e:
                st.error(str(e))
    if not profile.has_sources:
        st.info("Minimum one source required for analysis.")

profile = st.session_state.profile
scores = calculate_scores(profile)

# ===== TAB 2: Dashboard =====
with tab_dashboard:
    if profile.detected_metrics is None:
        st.info("Analyze your profile to see your readiness score.")
    else:
        col_score, col_stats = st.columns([1, 2])
        with col_score:
            st.markdown(
                f'<p class="score-big">{scores.overall_score}</p>'
                '<p class="score-caption">Readiness score</p>',
                unsafe_allow_html=True,
            )
            st.metric("Growth index", scores.growth_index)
        with col_stats:
            for label, value in [
                ("Skills", scores.skills_score),
                ("Projects", scores.projects_score),
                ("Internships", scores.internships_score),
                ("Certifications", scores.certifications_score),
            ]:
                st.progress(value / 100, text=f"{label}: {value}/100")

        metrics = profile.detected_metrics
        st.markdown("#### Detected")
        cols = st.columns(5)
        for col, (label, items) in zip(cols, [
            ("Skills", metrics.skills),
            ("Projects", metrics.projects),
            ("Internships", metrics.internships),
            ("Certifications", metrics.certifications),
            ("Interests", metrics.interests),
        ]):
            with col:
                st.markdown(f"**{label}** ({len(items)})")
                for item in items[:12]:
                    st.caption(item)

# ===== TAB 3: AI Coach =====
with tab_coach:
    insights = st.session_state.insights
    if insights is None:
        if settings.ai_enabled:
            st.info("Run an analysis to get coaching.")
        else:
            st.info("Add a Gemini API key in the sidebar to unlock AI coaching.")
    else:
        st.markdown(f"#### Path to {st.session_state.target_role}")
        st.write(insights.career_explanation)

        col_s, col_w = st.columns(2)
        with col_s:
            st.markdown("**Strengths**")
            for s in insights.strengths:
                st.markdown(f"- {s}")
        with col_w:
            st.markdown("**Gaps**")
            for w in insights.weaknesses:
                st.markdown(f"- {w}")

        st.markdown("#### Recommended projects")
        for rec in insights.project_recommendations:
            with st.expander(rec.title):
                st.write(rec.description)
                if rec.skills_gained:
                    st.caption("Skills gained: " + ", ".join(rec.skills_gained))

        st.markdown("#### Skill roadmap")
        for item in insights.skill_roadmap:
            st.markdown(f"- **{item.skill}** ({item.priority}): {item.reason}")

        col_c, col_i, col_h = st.columns(3)
        with col_c:
            st.markdown("**Certifications**")
            for c in insights.certifications:
                st.caption(c)
        with col_i:
            st.markdown("**Internship tracks**")
            for c in insights.internship_categories:
                st.caption(c)
        with col_h:
            st.markdown("**Hackathons**")
            for c in insights.hackathon_categories:
                st.caption(c)

# ===== TAB 4: Simulator =====
with tab_sim:
    if st.session_state.simulation is None and profile.detected_metrics is not None:
        st.session_state.simulation = Simulation(profile)
    sim: Simulation | None = st.session_state.simulation
    if sim is None:
        st.info("Analyze your profile first, then toggle future milestones here.")
    else:
        col_toggles, col_result = st.columns([3, 2])
        with col_toggles:
            st.markdown("#### If you complete...")
            suggestions = insights.future_simulation.if_user_completes if insights else []
            for i, label in enumerate(suggestions):
                if st.toggle(label, value=sim.is_active(label), key=f"sim_{i}") != sim.is_active(label):
                    sim.toggle_achievement(label)
                    st.rerun()
            for kind, label in [("internships", "Relevant core internship"),
                                ("certifications", "Advanced domain certification")]:
                active = sim.is_generic_active(kind)
                if st.toggle(label, value=active, key=f"sim_{kind}") != active:
                    sim.toggle_generic(kind)
                    st.rerun()
            if st.button("Reset simulation"):
                sim.reset()
                st.rerun()

        with col_result:
            simulated = sim.simulated_scores
            delta = sim.score_delta["overall_score"]
            st.markdown(
                f'<p class="score-big">{simulated.overall_score}</p>'
                '<p class="score-caption">Simulated readiness</p>',
                unsafe_allow_html=True,
            )
            st.metric("Change vs current", f"{simulated.overall_score}", delta=delta)
            if insights and insights.future_simulation.expected_score_range:
                st.caption(f"AI target corridor: **{insights.future_simulation.expected_score_range}**")
