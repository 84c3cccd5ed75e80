from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from hackmate.backend.ai.cache import ResponseCache
from hackmate.backend.ai.processor import ActionProcessor, resolve_intent, validate_payload
from hackmate.backend.ai.types import Intent, ResultSource


logger = logging.getLogger(__name__)

ProcessorFactory = Callable[[], ActionProcessor]


@dataclass(frozen=True)
class PipelineResult:
	intent: Intent
	text: str
	cached: bool
	source: ResultSource

	def as_dict(self) -> Dict[str, object]:
		return {
			"intent": self.intent.value,
			"result": self.text,
			"cached": self.cached,
			"source": self.source,
		}


class AIPipeline:
	"""Payload validation, cache lookup, then at most one processor run, then cache store."""

	def __init__(self, *, cache: ResponseCache, processor_factory: ProcessorFactory):
		self._cache = cache
		self._processor_factory = processor_factory

	def handle(self, intent: Intent | str, payload: Mapping[str, Any] | None) -> PipelineResult:
		resolved = resolve_intent(intent)
		payload = validate_payload(resolved, payload)
		entry = self._cache.get_entry(resolved, payload)
		if entry is not None:
			logger.debug("Cache hit for %s", resolved.value)
			return PipelineResult(resolved, entry.text, True, entry.source)

		result = self._processor_factory().process(resolved, payload)
		self._cache.put(resolved, payload, result.text, result.source)
		return PipelineResult(resolved, result.text, False, result.source)
