from __future__ import annotations

from typing import Sequence

from hackmate.backend.ai.types import Attempt


class AIError(Exception):
	"""Base class for failures inside the AI request pipeline."""


class GatewayError(AIError):
	def __init__(self, attempt: Attempt):
		super().__init__(attempt.describe())
		self.attempt = attempt

	@property
	def model_id(self) -> str:
		return self.attempt.model_id


class RateLimited(GatewayError):
	pass


class AllModelsFailed(AIError):
	def __init__(self, last_error: GatewayError | None, attempts: Sequence[Attempt] = ()):
		message = str(last_error) if last_error is not None else "All AI models failed"
		super().__init__(message)
		self.last_error = last_error
		self.attempts = list(attempts)

	@property
	def rate_limited(self) -> bool:
		"""True when every attempt that reached a backend was told to back off."""
		return bool(self.attempts) and all(a.outcome == "rate_limited" for a in self.attempts)


class MalformedResponse(AIError):
	def __init__(self, message: str, raw: str = ""):
		super().__init__(message)
		self.raw = raw


class InvalidIntent(AIError):
	def __init__(self, intent: object):
		super().__init__(f"Unsupported intent: {intent!r}")
		self.intent = intent


class InvalidPayload(AIError):
	def __init__(self, intent: object, evidence: Sequence[str] = ()):
		super().__init__(f"Payload is invalid for intent '{intent}'.")
		self.intent = intent
		self.evidence = list(evidence)
