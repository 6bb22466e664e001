# Role: Central enum of dashboard features. Keeps the system consistent across:
# endpoint configuration, the feature facade, fallback logging, and the API snapshot.

from enum import Enum


class Feature(str, Enum):
    CHAT = "chat"
    AI_CHAT = "ai_chat"
    DECISION = "decision"
    DOCUMENT = "document"
    REPORT = "report"
    LEARNING_PLAN = "learning_plan"
    CV = "cv"

    @property
    def env_var(self) -> str:
        # e.g. Feature.LEARNING_PLAN -> WEBHOOK_LEARNING_PLAN_URL
        return f"WEBHOOK_{self.name}_URL"
