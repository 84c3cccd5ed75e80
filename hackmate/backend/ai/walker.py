from __future__ import annotations

import logging
from typing import Iterable, List, Protocol

from hackmate.backend.ai.errors import AllModelsFailed, GatewayError, RateLimited
from hackmate.backend.ai.types import Attempt


logger = logging.getLogger(__name__)


class CompletionGateway(Protocol):
	def complete(self, model_id: str, prompt_text: str) -> Attempt: ...


class FallbackWalker:
	"""Try each roster model in order and return the first completion text."""

	def __init__(self, gateway: CompletionGateway, roster: Iterable[str]):
		self._gateway = gateway
		self._roster = tuple(roster)

	def run(self, prompt_text: str) -> str:
		last_error: GatewayError | None = None
		attempts: List[Attempt] = []
		for model_id in self._roster:
			attempt = self._gateway.complete(model_id, prompt_text)
			attempts.append(attempt)
			if attempt.ok:
				logger.info("Completion served by %s after %d attempt(s)", model_id, len(attempts))
				return attempt.text
			if attempt.outcome == "rate_limited":
				last_error = RateLimited(attempt)
			elif attempt.outcome in {"http_error", "network_error"}:
				last_error = GatewayError(attempt)

		error = AllModelsFailed(last_error, attempts)
		logger.error("All %d models failed; last error: %s", len(attempts), error)
		raise error
