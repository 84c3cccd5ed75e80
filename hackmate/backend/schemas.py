from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiError(BaseModel):
	model_config = ConfigDict(extra="forbid")

	code: str
	message: str
	evidence: List[str] = Field(default_factory=list)
	retry_after: Optional[int] = None


class ApiEnvelope(BaseModel):
	model_config = ConfigDict(extra="allow")

	ok: bool
	generated_at: str
	request_id: Optional[str] = None
	data: Optional[Dict[str, Any]] = None
	error: Optional[ApiError] = None


class AIRequest(BaseModel):
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	# kept as a plain string so unknown intents map to ai_invalid_intent, not 422
	intent: str = Field(..., description="analyze_idea | generate_tasks | mentor_chat")
	payload: Dict[str, Any] = Field(default_factory=dict)


class AIResultData(BaseModel):
	model_config = ConfigDict(extra="forbid")

	intent: Literal["analyze_idea", "generate_tasks", "mentor_chat"]
	result: str
	cached: bool
	source: Literal["model", "fallback"]


class AIModelsData(BaseModel):
	model_config = ConfigDict(extra="forbid")

	models: List[str] = Field(default_factory=list)
	gateway_url: str
	gateway_ready: bool = True
	gateway_warnings: List[str] = Field(default_factory=list)
