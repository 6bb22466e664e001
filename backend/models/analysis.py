# Role: Typed result records for each dashboard feature. Webhooks speak camelCase JSON (keyPoints, atsScore, ...),
# so every record accepts and emits camelCase aliases while Python code uses snake_case attributes.
# Live webhook bodies and simulated (mock) responses both decode into the same records.

from __future__ import annotations

import math
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

WORDS_PER_MINUTE = 200

ModelName = Literal["gemini", "deepseek"]


class WebhookRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AIResponse(WebhookRecord):
    content: str
    model: ModelName
    alternative_content: Optional[str] = None
    alternative_model: Optional[ModelName] = None


class DecisionAnalysis(WebhookRecord):
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    recommendation: str
    confidence: int = Field(ge=0, le=100)


def reading_time_minutes(word_count: int) -> int:
    return math.ceil(word_count / WORDS_PER_MINUTE)


class DocumentAnalysis(WebhookRecord):
    summary: str
    key_points: List[str] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)
    sentiment: Literal["positive", "neutral", "negative"]
    word_count: int = Field(ge=0)
    reading_time_minutes: Optional[int] = None
    reading_time: Optional[str] = None

    @model_validator(mode="after")
    def _fill_reading_time(self):
        # Webhooks may send only wordCount; derive the estimate the same way the mock does.
        if self.reading_time_minutes is None:
            self.reading_time_minutes = reading_time_minutes(self.word_count)
        if self.reading_time is None:
            self.reading_time = f"{self.reading_time_minutes} min"
        return self


class ReportHighlight(WebhookRecord):
    title: str
    value: str
    trend: Literal["up", "down", "neutral"] = "neutral"
    change: Optional[str] = None


class ReportAnalysis(WebhookRecord):
    overview: str
    highlights: List[ReportHighlight] = Field(default_factory=list)
    insights: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)


class RoadmapStep(WebhookRecord):
    id: str
    title: str
    description: str
    duration: str
    resources: List[str] = Field(default_factory=list)
    completed: bool = False


class LearningPlan(WebhookRecord):
    skill: str
    level: Literal["beginner", "intermediate", "advanced"]
    estimated_time: str
    roadmap: List[RoadmapStep] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)


class CVData(WebhookRecord):
    full_name: Optional[str] = None
    target_role: Optional[str] = None
    summary: str = ""
    experience: str = ""
    skills: List[str] = Field(default_factory=list)
    education: Optional[str] = None


class CVOptimization(WebhookRecord):
    optimized_summary: str
    skill_suggestions: List[str] = Field(default_factory=list)
    improvement_tips: List[str] = Field(default_factory=list)
    ats_score: int = Field(ge=0, le=100)
