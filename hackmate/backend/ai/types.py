from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal


AttemptOutcome = Literal["success", "rate_limited", "http_error", "network_error", "empty"]
ResultSource = Literal["model", "fallback"]
ExpectedShape = Literal["object", "array"]


class Intent(str, Enum):
	ANALYZE_IDEA = "analyze_idea"
	GENERATE_TASKS = "generate_tasks"
	MENTOR_CHAT = "mentor_chat"


@dataclass(frozen=True)
class Attempt:
	model_id: str
	outcome: AttemptOutcome
	text: str = ""
	status_code: int | None = None
	detail: str = ""

	@property
	def ok(self) -> bool:
		return self.outcome == "success" and bool(self.text)

	def describe(self) -> str:
		if self.outcome == "http_error":
			return f"{self.model_id}: HTTP {self.status_code}: {self.detail}"
		if self.outcome == "rate_limited":
			return f"{self.model_id}: rate limited"
		if self.outcome == "network_error":
			return f"{self.model_id}: network error: {self.detail}"
		if self.outcome == "empty":
			return f"{self.model_id}: empty completion"
		return f"{self.model_id}: success"


@dataclass(frozen=True)
class ActionResult:
	intent: Intent
	text: str
	value: Any
	source: ResultSource = "model"
