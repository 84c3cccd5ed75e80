"""
Chat-completion client for the model aggregation gateway.

One ``complete`` call is one HTTP attempt against one model. Every outcome is
folded into an :class:`Attempt` so the fallback walker never sees transport
exceptions.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import openai
from openai import OpenAI

from hackmate.backend import constants
from hackmate.backend.ai.types import Attempt


logger = logging.getLogger(__name__)

Cooldown = Callable[[str], None]

_MAX_ERROR_DETAIL_CHARS = 500


class FixedCooldown:
	"""Pause for a fixed window after a model signals overload."""

	def __init__(
		self,
		seconds: float = constants.RATE_LIMIT_COOLDOWN_S,
		sleep: Callable[[float], None] = time.sleep,
	):
		self.seconds = seconds
		self._sleep = sleep

	def __call__(self, model_id: str) -> None:
		if self.seconds <= 0:
			return
		logger.info("Cooling down %.1fs after rate limit from %s", self.seconds, model_id)
		self._sleep(self.seconds)


def build_openai_client(*, api_key: str, base_url: str, timeout_s: float, app_url: str) -> OpenAI:
	# max_retries=0: retrying is the walker's job, one model at a time
	return OpenAI(
		api_key=api_key,
		base_url=base_url,
		timeout=timeout_s,
		max_retries=0,
		default_headers={
			"HTTP-Referer": app_url,
			"X-Title": constants.APP_NAME,
		},
	)


def _completion_text(response: Any) -> str:
	choices = getattr(response, "choices", None)
	if choices is None and isinstance(response, dict):
		choices = response.get("choices")
	if not choices:
		return ""
	first = choices[0]
	message = getattr(first, "message", None)
	if message is None and isinstance(first, dict):
		message = first.get("message")
	content = getattr(message, "content", None)
	if content is None and isinstance(message, dict):
		content = message.get("content")
	if not isinstance(content, str):
		return ""
	return content if content.strip() else ""


def _error_detail(exc: openai.APIStatusError) -> str:
	response = getattr(exc, "response", None)
	body = getattr(response, "text", "") if response is not None else ""
	detail = (body or "").strip() or str(exc.message)
	return detail[:_MAX_ERROR_DETAIL_CHARS]


class GatewayClient:
	def __init__(
		self,
		client: Any,
		*,
		cooldown: Cooldown | None = None,
		max_prompt_chars: int = constants.PROMPT_MAX_CHARS,
	):
		self._client = client
		self._cooldown = cooldown if cooldown is not None else FixedCooldown()
		self._max_prompt_chars = max_prompt_chars

	def complete(self, model_id: str, prompt_text: str) -> Attempt:
		prompt = prompt_text[: self._max_prompt_chars]
		try:
			response = self._client.chat.completions.create(
				model=model_id,
				messages=[{"role": "user", "content": prompt}],
			)
		except openai.RateLimitError:
			logger.warning("Model %s rate limited", model_id)
			self._cooldown(model_id)
			return Attempt(model_id=model_id, outcome="rate_limited", status_code=429)
		except openai.APIStatusError as exc:
			logger.warning("Model %s returned HTTP %s", model_id, exc.status_code)
			return Attempt(
				model_id=model_id,
				outcome="http_error",
				status_code=exc.status_code,
				detail=_error_detail(exc),
			)
		except openai.APIConnectionError as exc:
			logger.warning("Model %s unreachable: %s", model_id, exc)
			return Attempt(model_id=model_id, outcome="network_error", detail=str(exc))
		except openai.APIResponseValidationError:
			logger.debug("Model %s returned an unreadable completion body", model_id)
			return Attempt(model_id=model_id, outcome="empty")

		text = _completion_text(response)
		if not text:
			logger.debug("Model %s returned no completion content", model_id)
			return Attempt(model_id=model_id, outcome="empty")
		return Attempt(model_id=model_id, outcome="success", text=text)
