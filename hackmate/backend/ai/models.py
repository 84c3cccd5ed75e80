from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hackmate.backend import constants


class AnalyzeIdeaPayload(BaseModel):
	model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

	idea: str = Field(..., min_length=1, description="Free-text project idea.")
	duration: str = Field(default=constants.DEFAULT_DURATION)

	@field_validator("duration", mode="before")
	@classmethod
	def _default_duration(cls, value: Any) -> Any:
		if value is None or (isinstance(value, str) and not value.strip()):
			return constants.DEFAULT_DURATION
		return value


class GenerateTasksPayload(BaseModel):
	model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, populate_by_name=True)

	project_name: str = Field(default="", alias="projectName")
	features: List[str] = Field(default_factory=list)
	duration: str = Field(default=constants.DEFAULT_DURATION)

	@field_validator("features", mode="before")
	@classmethod
	def _drop_blank_features(cls, value: Any) -> Any:
		if value is None:
			return []
		if isinstance(value, list):
			return [item for item in value if not (isinstance(item, str) and not item.strip())]
		return value

	@field_validator("duration", mode="before")
	@classmethod
	def _default_duration(cls, value: Any) -> Any:
		if value is None or (isinstance(value, str) and not value.strip()):
			return constants.DEFAULT_DURATION
		return value


class MentorChatPayload(BaseModel):
	model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

	question: str = Field(..., min_length=1, description="Question for the mentor.")
	context: str = Field(default=constants.DEFAULT_MENTOR_CONTEXT)

	@field_validator("context", mode="before")
	@classmethod
	def _default_context(cls, value: Any) -> Any:
		if value is None or (isinstance(value, str) and not value.strip()):
			return constants.DEFAULT_MENTOR_CONTEXT
		return value


class IdeaAnalysis(BaseModel):
	model_config = ConfigDict(extra="ignore")

	problem_statement: str = Field(..., min_length=1)
	target_users: List[str]
	features: List[str] = Field(default_factory=list)
	risks: List[str] = Field(default_factory=list)
	tech_stack_suggestions: List[str] = Field(default_factory=list)


class TaskDraft(BaseModel):
	model_config = ConfigDict(extra="ignore")

	title: str = constants.DEFAULT_TASK_TITLE
	description: str = constants.DEFAULT_TASK_DESCRIPTION
	effort: Literal["Low", "Medium", "High"] = constants.DEFAULT_TASK_EFFORT


PAYLOAD_MODELS: Dict[str, type[BaseModel]] = {
	"analyze_idea": AnalyzeIdeaPayload,
	"generate_tasks": GenerateTasksPayload,
	"mentor_chat": MentorChatPayload,
}


def string_list(value: Any) -> Optional[List[str]]:
	"""Return cleaned string items, or None when ``value`` is not a list."""
	if not isinstance(value, list):
		return None
	result: List[str] = []
	for item in value:
		if item is None or isinstance(item, (dict, list)):
			continue
		cleaned = " ".join(str(item).split()).strip()
		if cleaned:
			result.append(cleaned)
	return result
