from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from hackmate.backend import config, constants
from hackmate.backend.ai import (
	AIError,
	AIPipeline,
	ActionProcessor,
	AllModelsFailed,
	FallbackWalker,
	FixedCooldown,
	GatewayClient,
	Intent,
	InvalidIntent,
	InvalidPayload,
	ModelRoster,
	ResponseCache,
)
from hackmate.backend.ai.gateway import Cooldown, build_openai_client
from hackmate.backend.ai.processor import resolve_intent


logger = logging.getLogger(__name__)

_BUSY_MESSAGE = "AI is temporarily busy. Please try again."

_CACHE = ResponseCache()


class AIServiceError(Exception):
	def __init__(
		self,
		*,
		status_code: int,
		code: str,
		message: str,
		retry_after: int | None = None,
		evidence: List[str] | None = None,
	):
		super().__init__(message)
		self.status_code = status_code
		self.code = code
		self.message = message
		self.retry_after = retry_after
		self.evidence = evidence or []


def response_cache() -> ResponseCache:
	return _CACHE


def clear_cache() -> None:
	_CACHE.clear()


def _gateway_api_key() -> str:
	key = config.gateway_api_key()
	if key:
		return key
	raise AIServiceError(
		status_code=503,
		code="ai_gateway_unconfigured",
		message="AI gateway key not configured. Set OPENROUTER_API_KEY.",
	)


def _build_openai_client(*, api_key: str, base_url: str, timeout_s: float):
	return build_openai_client(
		api_key=api_key,
		base_url=base_url,
		timeout_s=timeout_s,
		app_url=config.app_url(),
	)


def _build_cooldown() -> Cooldown:
	return FixedCooldown()


def _build_processor() -> ActionProcessor:
	client = _build_openai_client(
		api_key=_gateway_api_key(),
		base_url=config.gateway_base_url(),
		timeout_s=config.gateway_timeout(),
	)
	gateway = GatewayClient(client, cooldown=_build_cooldown())
	return ActionProcessor(FallbackWalker(gateway, ModelRoster.from_config()))


def _pipeline_error(exc: AIError) -> AIServiceError:
	if isinstance(exc, AllModelsFailed) and exc.rate_limited:
		return AIServiceError(
			status_code=429,
			code="ai_rate_limited",
			message="All AI models are rate limited. Please retry shortly.",
			retry_after=constants.RATE_LIMIT_RETRY_AFTER_S,
		)
	return AIServiceError(
		status_code=503,
		code="ai_processing_failed",
		message=_BUSY_MESSAGE,
	)


def handle(*, intent: Any, payload: Mapping[str, Any] | None) -> Dict[str, object]:
	try:
		resolved = resolve_intent(intent)
	except InvalidIntent as exc:
		raise AIServiceError(
			status_code=400,
			code="ai_invalid_intent",
			message=f"Intent must be one of: {', '.join(item.value for item in Intent)}.",
		) from exc

	pipeline = AIPipeline(cache=_CACHE, processor_factory=_build_processor)
	try:
		result = pipeline.handle(resolved, payload)
	except InvalidPayload as exc:
		raise AIServiceError(
			status_code=400,
			code="ai_invalid_payload",
			message=str(exc),
			evidence=exc.evidence,
		) from exc
	except AIError as exc:
		logger.error("AI request for %s failed: %s", resolved.value, exc)
		raise _pipeline_error(exc) from exc
	return result.as_dict()


def list_models() -> Dict[str, object]:
	models = config.model_roster()
	warnings: List[str] = []
	if not config.gateway_api_key():
		warnings.append("AI gateway key not configured. Set OPENROUTER_API_KEY.")
	return {
		"models": models,
		"gateway_url": config.gateway_base_url(),
		"gateway_ready": not warnings,
		"gateway_warnings": warnings,
	}


def summary() -> Dict[str, object]:
	return {
		"environment": config.environment_report(),
		"models": len(config.model_roster()),
		"cache": {
			"entries": _CACHE.live_count(),
			"ttl_seconds": _CACHE.ttl_seconds,
		},
	}
