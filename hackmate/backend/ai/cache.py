from __future__ import annotations

import json
import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, Mapping, Optional

from hackmate.backend import constants
from hackmate.backend.ai.types import Intent, ResultSource


Clock = Callable[[], float]


def fingerprint(intent: Intent | str, payload: Mapping[str, Any]) -> str:
	name = intent.value if isinstance(intent, Intent) else str(intent)
	body = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
	return f"{name}:{body}"


@dataclass(frozen=True)
class CacheEntry:
	text: str
	source: ResultSource
	stored_at: float


class ResponseCache:
	"""
	In-process result cache keyed by intent + canonical payload.

	- Fixed TTL; expired entries read as absent and are overwritten, not swept.
	- Last write wins for identical fingerprints.
	- get/put are serialized by one lock (endpoints run in a thread pool).
	"""

	def __init__(self, ttl_seconds: float = constants.CACHE_TTL_SECONDS, clock: Clock = time.monotonic):
		self.ttl_seconds = ttl_seconds
		self._clock = clock
		self._lock = Lock()
		self._entries: Dict[str, CacheEntry] = {}

	def _fresh(self, entry: CacheEntry, now: float) -> bool:
		return now - entry.stored_at < self.ttl_seconds

	def get_entry(self, intent: Intent | str, payload: Mapping[str, Any]) -> Optional[CacheEntry]:
		key = fingerprint(intent, payload)
		with self._lock:
			entry = self._entries.get(key)
			if entry is None or not self._fresh(entry, self._clock()):
				return None
			return entry

	def get(self, intent: Intent | str, payload: Mapping[str, Any]) -> Optional[str]:
		entry = self.get_entry(intent, payload)
		return entry.text if entry is not None else None

	def put(
		self,
		intent: Intent | str,
		payload: Mapping[str, Any],
		text: str,
		source: ResultSource = "model",
	) -> None:
		key = fingerprint(intent, payload)
		with self._lock:
			self._entries[key] = CacheEntry(text=text, source=source, stored_at=self._clock())

	def clear(self) -> None:
		with self._lock:
			self._entries.clear()

	def live_count(self) -> int:
		with self._lock:
			now = self._clock()
			return sum(1 for entry in self._entries.values() if self._fresh(entry, now))
