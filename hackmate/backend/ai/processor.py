"""
Intent handlers: prompt, walk the roster, normalize, validate.

Structured intents (idea analysis, task generation) never fail outward; any
pipeline error is logged and replaced with static placeholder content tagged
``source="fallback"``. Mentor chat has no placeholder and re-raises.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Sequence

from pydantic import ValidationError

from hackmate.backend import constants
from hackmate.backend.ai import fallbacks, normalizer, prompts
from hackmate.backend.ai.errors import AIError, InvalidIntent, InvalidPayload, MalformedResponse
from hackmate.backend.ai.models import PAYLOAD_MODELS, IdeaAnalysis, TaskDraft, string_list
from hackmate.backend.ai.types import ActionResult, Intent
from hackmate.backend.ai.walker import FallbackWalker


logger = logging.getLogger(__name__)


def resolve_intent(value: Any) -> Intent:
	if isinstance(value, Intent):
		return value
	try:
		return Intent(str(value).strip().lower())
	except ValueError as exc:
		raise InvalidIntent(value) from exc


def validate_payload(intent: Intent, payload: Mapping[str, Any] | None) -> Dict[str, Any]:
	"""Apply field aliases and defaults; the result is what gets fingerprinted."""
	model = PAYLOAD_MODELS[intent.value]
	try:
		parsed = model.model_validate(dict(payload or {}))
	except ValidationError as exc:
		evidence = []
		for issue in exc.errors():
			loc = ".".join(str(part) for part in issue.get("loc", []))
			msg = issue.get("msg", "Invalid value.")
			evidence.append(f"{loc}: {msg}" if loc else msg)
		raise InvalidPayload(intent.value, evidence) from exc
	return parsed.model_dump()


def validate_idea_analysis(value: Any) -> Dict[str, Any]:
	if not isinstance(value, dict):
		raise MalformedResponse("Idea analysis must be a JSON object.")
	problem = value.get("problem_statement")
	if not isinstance(problem, str) or not problem.strip():
		raise MalformedResponse("Idea analysis is missing problem_statement.")
	target_users = string_list(value.get("target_users"))
	if target_users is None:
		raise MalformedResponse("Idea analysis target_users must be a list.")
	candidate = {
		"problem_statement": problem.strip(),
		"target_users": target_users,
		"features": string_list(value.get("features")) or [],
		"risks": string_list(value.get("risks")) or [],
		"tech_stack_suggestions": string_list(value.get("tech_stack_suggestions")) or [],
	}
	try:
		return IdeaAnalysis.model_validate(candidate).model_dump()
	except ValidationError as exc:
		raise MalformedResponse("Idea analysis has an incompatible shape.") from exc


def normalize_task(item: Any) -> Dict[str, str]:
	"""Apply the task defaults: blank title, missing description, unknown effort."""
	source = item if isinstance(item, dict) else {}

	title = source.get("title")
	if title is not None and not isinstance(title, str):
		title = str(title)
	title = (title or "").strip() or constants.DEFAULT_TASK_TITLE

	# only an absent description is defaulted; an empty string is kept
	description = source.get("description")
	if description is None:
		description = constants.DEFAULT_TASK_DESCRIPTION
	elif not isinstance(description, str):
		description = str(description)

	effort = source.get("effort")
	if not isinstance(effort, str) or effort not in constants.TASK_EFFORTS:
		effort = constants.DEFAULT_TASK_EFFORT

	return TaskDraft(title=title, description=description, effort=effort).model_dump()


def validate_task_list(value: Any) -> List[Any]:
	if not isinstance(value, list) or not value:
		raise MalformedResponse("Task list must be a non-empty JSON array.")
	return value


class ActionProcessor:
	def __init__(self, walker: FallbackWalker):
		self._walker = walker

	def process(self, intent: Intent, payload: Mapping[str, Any]) -> ActionResult:
		if intent is Intent.ANALYZE_IDEA:
			return self.analyze_idea(payload["idea"], payload.get("duration"))
		if intent is Intent.GENERATE_TASKS:
			return self.generate_tasks(
				payload.get("project_name", ""),
				payload.get("features") or [],
				payload.get("duration"),
			)
		if intent is Intent.MENTOR_CHAT:
			return self.mentor_chat(payload["question"], payload.get("context"))
		raise InvalidIntent(intent)

	def analyze_idea(self, idea: str, duration: str | None = None) -> ActionResult:
		prompt = prompts.analyze_idea_prompt(idea, duration or constants.DEFAULT_DURATION)
		try:
			raw = self._walker.run(prompt)
			analysis = validate_idea_analysis(normalizer.extract(raw, "object"))
		except AIError as exc:
			logger.warning("analyze_idea using fallback content: %s", exc)
			analysis = fallbacks.idea_analysis()
			return ActionResult(Intent.ANALYZE_IDEA, json.dumps(analysis), analysis, "fallback")
		return ActionResult(Intent.ANALYZE_IDEA, json.dumps(analysis), analysis, "model")

	def generate_tasks(
		self,
		project_name: str,
		features: Sequence[str],
		duration: str | None = None,
	) -> ActionResult:
		prompt = prompts.generate_tasks_prompt(
			project_name,
			list(features),
			duration or constants.DEFAULT_DURATION,
		)
		source = "model"
		try:
			raw = self._walker.run(prompt)
			items = validate_task_list(normalizer.extract(raw, "array"))
		except AIError as exc:
			logger.warning("generate_tasks using fallback content: %s", exc)
			items = fallbacks.task_drafts()
			source = "fallback"
		tasks = [normalize_task(item) for item in items]
		return ActionResult(Intent.GENERATE_TASKS, json.dumps(tasks), tasks, source)

	def mentor_chat(self, question: str, context: str | None = None) -> ActionResult:
		prompt = prompts.mentor_chat_prompt(question, context or constants.DEFAULT_MENTOR_CONTEXT)
		text = self._walker.run(prompt).strip()
		return ActionResult(Intent.MENTOR_CHAT, text, text, "model")
