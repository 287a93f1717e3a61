from __future__ import annotations
import sys
from pathlib import Path
import streamlit as st
BASE_DIR = Path(__file__).parent.resolve()
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from pivotpath.state import Screen, Session
from pivotpath.graph.screens import Event, run_generation_with_status, transition
from pivotpath.agents.roadmap_agent import RoadmapClient
from pivotpath.agents.report_agent import export_file_name, render_json, render_markdown
from pivotpath.llm_provider import get_api_key
from pivotpath.profile import LEARNING_STYLES
from pivotpath.utils import ACCEPTED_EXTENSIONS, attach_resume
from pivotpath import wizard as wz
from dotenv import load_dotenv

STYLE_HINTS = {
    "Visual": "Videos & Charts",
    "Hands-on": "Projects & Labs",
    "Reading": "Articles & Books",
    "Mixed": "A bit of everything",
}


def _session() -> Session:
    return st.session_state["session"]


def _fire(event: Event, **payload) -> None:
    session = transition(_session(), event, **payload)
    if session.screen == Screen.WIZARD and _session().screen != Screen.WIZARD:
        st.session_state["wizard"] = wz.start_wizard(session.profile)
    st.session_state["session"] = session
    st.rerun()


def score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "orange"
    return "red"


# -------- Screens --------
def render_home() -> None:
    st.title("PivotPath AI")
    st.subheader("Pivot your career with intelligent precision.")
    st.write(
        "Don't just guess your next move. Upload your resume and let our AI build a data-driven bridge to your dream role."
    )
    if not get_api_key():
        st.error("Missing GEMINI_API_KEY (or GOOGLE_API_KEY). Add it to .env or Streamlit secrets.")
    c1, c2 = st.columns(2)
    if c1.button("Build My Roadmap", type="primary"):
        _fire(Event.START)
    if c2.button("View Sample"):
        _fire(Event.VIEW_SAMPLE)

    cols = st.columns(3)
    for col, (title, text) in zip(cols, [
        ("Identify Skill Gaps", "See exactly what you are missing for your target role."),
        ("Curated Resources", "Get specific courses, books, and projects to fill those gaps."),
        ("Realistic Timeline", "A week-by-week plan tailored to your learning style."),
    ]):
        col.markdown(f"**{title}**\n\n{text}")


def _step_resume(w: wz.WizardState) -> wz.WizardState:
    st.header("Upload your resume")
    st.caption("We'll scan it for ATS compatibility and transferable skills.")
    uploaded = st.file_uploader("Resume file", type=ACCEPTED_EXTENSIONS, accept_multiple_files=False)
    # The uploader keeps its file across reruns; only read each upload once
    if uploaded is not None and uploaded.file_id != st.session_state.get("last_upload"):
        st.session_state["last_upload"] = uploaded.file_id
        try:
            w = wz.apply(w, attach_resume(w.profile, uploaded.name, uploaded.getvalue(), uploaded.type))
        except ValueError as e:
            st.error(str(e))
    if w.profile.resume_file_name:
        st.success(f"Attached: {w.profile.resume_file_name}")
        if st.button("Remove file"):
            w = wz.apply(w, w.profile.without_resume())
    if w.profile.resume_attachment is None:
        text = st.text_area("...or paste your resume text", value=w.profile.resume_text, height=220)
        if text != w.profile.resume_text:
            w = wz.apply(w, w.profile.with_resume_text(text))
    return w


def _step_role(w: wz.WizardState) -> wz.WizardState:
    st.header("Where are you now?")
    role = st.text_input("Current role / background", value=w.profile.current_role,
                         placeholder="e.g. Marketing Coordinator")
    if role != w.profile.current_role:
        w = wz.update(w, current_role=role)
    return w


def _step_target(w: wz.WizardState) -> wz.WizardState:
    st.header("Where do you want to go?")
    role = st.text_input("Target role", value=w.profile.target_role, placeholder="e.g. UX Designer")
    industry = st.text_input("Target industry", value=w.profile.target_industry, placeholder="e.g. SaaS / Tech")
    if (role, industry) != (w.profile.target_role, w.profile.target_industry):
        w = wz.update(w, target_role=role, target_industry=industry)
    return w


def _step_skills(w: wz.WizardState) -> wz.WizardState:
    st.header("Your top skills")
    with st.form("add_skill", clear_on_submit=True):
        skill = st.text_input("Add a skill", placeholder="e.g. Project Management")
        if st.form_submit_button("Add"):
            w = wz.apply(w, w.profile.with_skill(skill))
    if not w.profile.top_skills:
        st.caption("Skills will appear here...")
    for i, s in enumerate(w.profile.top_skills):
        c1, c2 = st.columns([6, 1])
        c1.write(s)
        if c2.button("×", key=f"rm_skill_{i}"):
            w = wz.apply(w, w.profile.without_skill(s))
    return w


def _step_style(w: wz.WizardState) -> wz.WizardState:
    st.header("Learning Style")
    style = st.radio(
        "How do you prefer to digest new information?",
        options=list(LEARNING_STYLES),
        index=LEARNING_STYLES.index(w.profile.learning_style),
        format_func=lambda s: f"{s} ({STYLE_HINTS[s]})",
    )
    if style != w.profile.learning_style:
        w = wz.update(w, learning_style=style)
    return w


STEP_RENDERERS = [_step_resume, _step_role, _step_target, _step_skills, _step_style]


def render_wizard() -> None:
    w: wz.WizardState = st.session_state["wizard"]
    st.progress(wz.progress(w), text=f"{w.step + 1} / {len(wz.STEPS)} {w.title}")
    if st.button("Cancel"):
        _fire(Event.CANCEL)

    w = STEP_RENDERERS[w.step](w)
    st.session_state["wizard"] = w

    c1, c2 = st.columns(2)
    if c1.button("Back", disabled=w.step == 0 and not w.editing):
        w, outcome = wz.previous_step(w)
        st.session_state["wizard"] = w
        if outcome is not None:
            _fire(Event(outcome.value))
        st.rerun()
    if c2.button("Generate Roadmap" if w.is_last else "Continue", type="primary"):
        w, outcome = wz.next_step(w)
        st.session_state["wizard"] = w
        if outcome is wz.Outcome.COMPLETE:
            _fire(Event.COMPLETE, profile=w.profile)
        st.rerun()


def render_processing() -> None:
    # Clicking cancel reruns the script, which interrupts the status loop below
    if st.button("Cancel & Go Back"):
        _fire(Event.CANCEL)
    status = st.empty()
    st.caption("Please wait while we engineer your career path.")
    with st.spinner():
        session = run_generation_with_status(
            _session(), st.session_state["client"], on_tick=lambda msg: status.subheader(msg)
        )
    st.session_state["session"] = session
    st.rerun()


def render_results() -> None:
    session = _session()
    profile, data = session.profile, session.roadmap
    if profile is None or data is None:
        st.error("No roadmap produced.")
        return
    c1, c2 = st.columns(2)
    if c1.button("Back to inputs"):
        _fire(Event.EDIT)
    if c2.button("Export"):
        _fire(Event.EXPORT)

    st.caption("TARGET ROLE")
    st.header(profile.target_role)
    st.write(profile.target_industry)
    st.write(data.summary)
    st.metric("Estimated Time", data.estimated_total_time)

    ats = data.ats_analysis
    st.subheader("ATS Score")
    st.markdown(f"### :{score_color(ats.score)}[{ats.score}] / 100 ({ats.match_level})")
    if ats.missing_keywords:
        st.markdown("**Missing Keywords**")
        shown = ", ".join(f"`{kw}`" for kw in ats.missing_keywords[:5])
        more = len(ats.missing_keywords) - 5
        st.markdown(shown + (f" + {more} more" if more > 0 else ""))
    st.markdown("**Optimization Tips**")
    for tip in ats.tips[:3]:
        st.markdown(f"- {tip}")
    if ats.formatting_issues:
        with st.expander("Formatting issues"):
            for issue in ats.formatting_issues:
                st.markdown(f"- {issue}")

    st.subheader("Current Analysis")
    st.write(data.current_analysis)
    st.subheader("Gap Analysis")
    for gap in data.gap_analysis:
        st.markdown(f"- {gap}")

    st.subheader("Your Roadmap")
    for i, ms in enumerate(data.timeline, 1):
        with st.container(border=True):
            st.markdown(f"**{i}. {ms.title}** · {ms.duration}")
            st.write(ms.description)
            for action in ms.key_actions:
                st.markdown(f"- {action}")
            for r in ms.resources:
                label = f"[{r.title}]({r.url})" if r.url else r.title
                st.markdown(f"{r.type}: {label}" + (f" ({r.provider})" if r.provider else ""))


def render_export() -> None:
    session = _session()
    st.header("Roadmap Ready!")
    st.write("Your strategic career plan has been generated.")
    if session.profile is not None and session.roadmap is not None:
        st.download_button(
            label="Download as .md",
            data=render_markdown(session.profile, session.roadmap).encode("utf-8"),
            file_name=export_file_name(session.profile, "md"),
            mime="text/markdown",
        )
        st.download_button(
            label="Download as .json",
            data=render_json(session.roadmap).encode("utf-8"),
            file_name=export_file_name(session.profile, "json"),
            mime="application/json",
        )
    if st.button("Back to Dashboard"):
        _fire(Event.BACK)


def render_error() -> None:
    st.header("Generation Failed")
    st.write(_session().error_message)
    if st.button("Try Again", type="primary"):
        _fire(Event.RETRY)
    if st.button("Back to Start"):
        _fire(Event.BACK)


RENDERERS = {
    Screen.HOME: render_home,
    Screen.WIZARD: render_wizard,
    Screen.PROCESSING: render_processing,
    Screen.RESULTS: render_results,
    Screen.EXPORT: render_export,
    Screen.ERROR: render_error,
}


def main():
    load_dotenv()
    st.set_page_config(page_title="PivotPath AI", page_icon="🧭", layout="centered")
    st.session_state.setdefault("session", Session())
    st.session_state.setdefault("wizard", wz.start_wizard())
    st.session_state.setdefault("client", RoadmapClient())
    RENDERERS[_session().screen]()


if __name__ == "__main__":
    main()
