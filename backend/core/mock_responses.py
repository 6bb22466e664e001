# Role: Deterministic simulated responses used when a webhook is unreachable or misbehaves.
# Each builder returns the same record type a live webhook call decodes into, so the UI renders both identically.

from __future__ import annotations

from typing import Sequence

from backend.models.analysis import (
    AIResponse,
    CVOptimization,
    DecisionAnalysis,
    DocumentAnalysis,
    LearningPlan,
    ReportAnalysis,
    ReportHighlight,
    RoadmapStep,
    reading_time_minutes,
)
from backend.models.message import AIMessage
from backend.utils.text_stats import count_words, preview


def mock_assistant_reply(message: str) -> str:
    return f'Simulated response to: "{preview(message, 50)}..."'


def mock_ai_response(messages: Sequence[AIMessage]) -> AIResponse:
    last_message = messages[-1].content if messages else ""
    return AIResponse(
        content=mock_assistant_reply(last_message),
        model="gemini",
        alternative_content="Alternative response from DeepSeek (simulated)",
        alternative_model="deepseek",
    )


def mock_decision_analysis(problem: str) -> DecisionAnalysis:
    return DecisionAnalysis(
        pros=["Increased efficiency", "Cost savings", "Better UX", "Competitive advantage"],
        cons=["Initial investment", "Learning curve", "Integration challenges"],
        risks=["Tech may become outdated", "Third-party dependency"],
        benefits=["Scalable solution", "Faster development", "Better maintainability"],
        recommendation=f'Proceeding is recommended for "{preview(problem, 30)}..."',
        confidence=85,
    )


def mock_document_analysis(content: str) -> DocumentAnalysis:
    word_count = count_words(content)
    minutes = reading_time_minutes(word_count)
    return DocumentAnalysis(
        summary="Document analysis simulated.",
        key_points=["Code reviews", "Automated tests", "CI/CD pipelines", "Documentation"],
        action_items=["Automated testing", "Code review", "CI/CD setup", "Team retrospectives"],
        sentiment="positive",
        word_count=word_count,
        reading_time_minutes=minutes,
        reading_time=f"{minutes} min",
    )


def mock_report_analysis() -> ReportAnalysis:
    return ReportAnalysis(
        overview="Report analysis simulated.",
        highlights=[
            ReportHighlight(title="Revenue", value="$2.4M", trend="up", change="+23%"),
            ReportHighlight(title="Users", value="145K", trend="up", change="+18%"),
        ],
        insights=["Mobile traffic up", "Enterprise growth", "CLV improved"],
        recommendations=["Invest mobile", "Expand sales", "Advanced analytics"],
        risks=["Competition", "Single provider dependency"],
    )


def mock_learning_plan(skill: str) -> LearningPlan:
    return LearningPlan(
        skill=skill,
        level="beginner",
        estimated_time="3-4 months",
        roadmap=[
            RoadmapStep(id="1", title="Basics", description="Learn fundamentals", duration="2-3 weeks",
                        resources=["Docs", "Tutorials"]),
            RoadmapStep(id="2", title="Practice", description="Small projects", duration="3-4 weeks",
                        resources=["Code Challenges"]),
            RoadmapStep(id="3", title="Intermediate", description="Advanced patterns", duration="4-5 weeks",
                        resources=["Books", "Courses"]),
            RoadmapStep(id="4", title="Projects", description="Real apps", duration="4-6 weeks",
                        resources=["Open Source", "Portfolio"]),
        ],
        tips=["1-2 hrs daily", "Build while learning", "Join communities", "Document journey", "Review regularly"],
    )


def mock_cv_optimization() -> CVOptimization:
    return CVOptimization(
        optimized_summary="Simulated CV optimization.",
        skill_suggestions=["TypeScript", "Cloud Architecture", "System Design"],
        improvement_tips=["Quantifiable achievements", "Action verbs", "Relevant keywords"],
        ats_score=75,
    )
