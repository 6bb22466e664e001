# Role: Streamlit pages for the analysis panels. Each page renders its form, calls the backend once,
# keeps the last result in session_state and renders the record.

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

import requests
import streamlit as st

from backend.models.analysis import (
    CVData,
    CVOptimization,
    DecisionAnalysis,
    DocumentAnalysis,
    LearningPlan,
    ReportAnalysis,
)
from ui.api_client import BackendClient, split_skills

T = TypeVar("T")

_TREND_DELTA = {"up": "normal", "down": "inverse", "neutral": "off"}


def _run(label: str, key: str, call: Callable[[], T]) -> Optional[T]:
    # 1) Call the backend under a spinner
    # 2) Remember the result for reruns
    # 3) Surface transport/HTTP failures as an error box
    try:
        with st.spinner(f"{label}..."):
            result = call()
    except requests.RequestException as e:
        st.error(f"Request failed: {e}")
        return None
    st.session_state[key] = result
    return result


def _bullets(title: str, items: List[str]) -> None:
    st.markdown(f"**{title}**")
    if not items:
        st.caption("None")
        return
    st.markdown("\n".join(f"- {item}" for item in items))


# ----------------------------
# Decision analysis
# ----------------------------
def render_decision_result(result: DecisionAnalysis) -> None:
    col1, col2 = st.columns(2)
    with col1:
        _bullets("Pros", result.pros)
        _bullets("Risks", result.risks)
    with col2:
        _bullets("Cons", result.cons)
        _bullets("Benefits", result.benefits)

    st.subheader("Recommendation")
    st.info(result.recommendation)
    st.progress(result.confidence / 100, text=f"Confidence: {result.confidence}%")


def render_decision_page(client: BackendClient) -> None:
    st.header("Decision Analysis")
    st.caption("Weigh pros, cons, risks and benefits before you commit.")

    with st.form("decision_form"):
        problem = st.text_area("Describe the decision", placeholder="Should we migrate our backend to microservices?")
        submitted = st.form_submit_button("Analyze")

    if submitted:
        if not problem.strip():
            st.warning("Please describe the decision first.")
        else:
            _run("Analyzing", "decision_result", lambda: client.analyze_decision(problem.strip()))

    result = st.session_state.get("decision_result")
    if result:
        render_decision_result(result)


# ----------------------------
# Document analysis
# ----------------------------
def render_document_result(result: DocumentAnalysis) -> None:
    c1, c2, c3 = st.columns(3)
    c1.metric("Words", f"{result.word_count:,}")
    c2.metric("Reading time", result.reading_time)
    c3.metric("Sentiment", result.sentiment.capitalize())

    st.subheader("Summary")
    st.write(result.summary)
    col1, col2 = st.columns(2)
    with col1:
        _bullets("Key points", result.key_points)
    with col2:
        _bullets("Action items", result.action_items)


def render_document_page(client: BackendClient) -> None:
    st.header("Document Analysis")
    st.caption("Paste text or upload a plain-text file.")

    uploaded = st.file_uploader("Text file", type=["txt", "md"], key="document_upload")
    initial = uploaded.getvalue().decode("utf-8", errors="replace") if uploaded else ""

    with st.form("document_form"):
        content = st.text_area("Document content", value=initial, height=240)
        submitted = st.form_submit_button("Analyze document")

    if submitted:
        if not content.strip():
            st.warning("Please paste some text first.")
        else:
            _run("Analyzing document", "document_result", lambda: client.analyze_document(content))

    result = st.session_state.get("document_result")
    if result:
        render_document_result(result)


# ----------------------------
# Report analysis
# ----------------------------
def render_report_result(result: ReportAnalysis) -> None:
    st.subheader("Overview")
    st.write(result.overview)

    if result.highlights:
        cols = st.columns(len(result.highlights))
        for col, h in zip(cols, result.highlights):
            col.metric(h.title, h.value, delta=h.change, delta_color=_TREND_DELTA.get(h.trend, "off"))

    col1, col2, col3 = st.columns(3)
    with col1:
        _bullets("Insights", result.insights)
    with col2:
        _bullets("Recommendations", result.recommendations)
    with col3:
        _bullets("Risks", result.risks)


def render_report_page(client: BackendClient) -> None:
    st.header("Report Analysis")
    st.caption("Upload a report (PDF, spreadsheet, text) for a summary of highlights and risks.")

    uploaded = st.file_uploader("Report file", type=["pdf", "csv", "xlsx", "txt", "docx"], key="report_upload")
    if st.button("Analyze report", disabled=uploaded is None):
        data = uploaded.getvalue()
        _run("Analyzing report", "report_result", lambda: client.analyze_report(data, uploaded.name))

    result = st.session_state.get("report_result")
    if result:
        render_report_result(result)


# ----------------------------
# Learning plan
# ----------------------------
def render_learning_result(plan: LearningPlan) -> None:
    st.subheader(f"Roadmap: {plan.skill}")
    st.caption(f"Level: {plan.level} · Estimated time: {plan.estimated_time}")

    for step in plan.roadmap:
        with st.expander(f"{step.id}. {step.title} ({step.duration})"):
            st.write(step.description)
            if step.resources:
                st.markdown("Resources: " + ", ".join(step.resources))
            st.checkbox("Completed", value=step.completed, key=f"roadmap-{plan.skill}-{step.id}")

    _bullets("Tips", plan.tips)


def render_learning_page(client: BackendClient) -> None:
    st.header("Learning Plan")
    st.caption("Generate a step-by-step roadmap for any skill.")

    with st.form("learning_form"):
        skill = st.text_input("Skill", placeholder="e.g. Rust, data visualization, public speaking")
        submitted = st.form_submit_button("Generate plan")

    if submitted:
        if not skill.strip():
            st.warning("Please enter a skill.")
        else:
            _run("Generating plan", "learning_result", lambda: client.generate_learning_plan(skill.strip()))

    result = st.session_state.get("learning_result")
    if result:
        render_learning_result(result)


# ----------------------------
# CV optimization
# ----------------------------
def render_cv_result(result: CVOptimization) -> None:
    st.progress(result.ats_score / 100, text=f"ATS score: {result.ats_score}/100")
    st.subheader("Optimized summary")
    st.write(result.optimized_summary)
    col1, col2 = st.columns(2)
    with col1:
        _bullets("Skills to add", result.skill_suggestions)
    with col2:
        _bullets("Improvement tips", result.improvement_tips)


def render_cv_page(client: BackendClient) -> None:
    st.header("CV Optimization")
    st.caption("Get an ATS score and concrete suggestions for your CV.")

    with st.form("cv_form"):
        full_name = st.text_input("Full name")
        target_role = st.text_input("Target role")
        summary = st.text_area("Professional summary")
        experience = st.text_area("Experience", height=160)
        skills = st.text_input("Skills (comma separated)")
        education = st.text_input("Education")
        submitted = st.form_submit_button("Optimize CV")

    if submitted:
        if not (summary.strip() or experience.strip()):
            st.warning("Add at least a summary or your experience.")
        else:
            cv = CVData(
                full_name=full_name.strip() or None,
                target_role=target_role.strip() or None,
                summary=summary.strip(),
                experience=experience.strip(),
                skills=split_skills(skills),
                education=education.strip() or None,
            )
            _run("Optimizing CV", "cv_result", lambda: client.optimize_cv(cv))

    result = st.session_state.get("cv_result")
    if result:
        render_cv_result(result)
