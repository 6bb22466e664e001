# Role: UI-side HTTP client for the dashboard API. The backend is authoritative; this module only
# posts JSON and decodes the camelCase bodies back into the shared result records.

from __future__ import annotations

import base64
import os
from typing import Any, Dict, List, Optional

import requests

from backend.models.analysis import (
    CVData,
    CVOptimization,
    DecisionAnalysis,
    DocumentAnalysis,
    LearningPlan,
    ReportAnalysis,
)

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"


class BackendClient:
    def __init__(self, base_url: Optional[str] = None, timeout: float = 60) -> None:
        self.base_url = (base_url or os.getenv("DASHBOARD_BACKEND_URL") or DEFAULT_BACKEND_URL).rstrip("/")
        self.timeout = timeout

    def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        resp = requests.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def chat(self, message: str) -> str:
        return self._post("/chat", {"message": message})["reply"]

    def analyze_decision(self, problem: str) -> DecisionAnalysis:
        return DecisionAnalysis.model_validate(self._post("/decision", {"problem": problem}))

    def analyze_document(self, content: str) -> DocumentAnalysis:
        return DocumentAnalysis.model_validate(self._post("/document", {"content": content}))

    def analyze_report(self, file_bytes: bytes, file_name: str) -> ReportAnalysis:
        payload = {"fileData": base64.b64encode(file_bytes).decode("ascii"), "fileName": file_name}
        return ReportAnalysis.model_validate(self._post("/report", payload))

    def generate_learning_plan(self, skill: str) -> LearningPlan:
        return LearningPlan.model_validate(self._post("/learning-plan", {"skill": skill}))

    def optimize_cv(self, cv: CVData) -> CVOptimization:
        payload = {"cvData": cv.model_dump(by_alias=True)}
        return CVOptimization.model_validate(self._post("/cv", payload))

    def fetch_config(self) -> Optional[Dict[str, Any]]:
        try:
            r = requests.get(f"{self.base_url}/config", timeout=10)
            if r.status_code != 200:
                return None
            return r.json()
        except requests.RequestException:
            return None


def split_skills(raw: str) -> List[str]:
    return [s.strip() for s in (raw or "").replace("\n", ",").split(",") if s.strip()]
