"""
Recover a JSON object or array from a raw model completion.

Models wrap JSON in prose and markdown fences and get quoting wrong. The pipeline
is: strip fences, cut the outermost span, parse; if that fails, run the textual
repairs in ``REPAIRS`` and parse once more. The repairs only ever run after a
strict parse has failed, so valid JSON containing apostrophes is left intact.
Anything still unparsable raises :class:`MalformedResponse` instead of returning
a partial structure.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Tuple

from hackmate.backend.ai.errors import MalformedResponse
from hackmate.backend.ai.types import ExpectedShape


logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*|\s*```", re.IGNORECASE)
_SPAN_RES = {
	"object": re.compile(r"\{.*\}", re.DOTALL),
	"array": re.compile(r"\[.*\]", re.DOTALL),
}
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")
_BARE_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)(\s*):")
_SHAPE_TYPES = {"object": dict, "array": list}


def strip_code_fence(text: str) -> str:
	return _FENCE_RE.sub("", text).strip()


def extract_span(text: str, expected_shape: ExpectedShape) -> str:
	pattern = _SPAN_RES.get(expected_shape)
	if pattern is None:
		raise ValueError(f"Unknown expected shape: {expected_shape!r}")
	match = pattern.search(text)
	if match is None:
		raise MalformedResponse(f"No JSON {expected_shape} found in model response.", raw=text)
	return match.group(0)


def replace_single_quotes(text: str) -> str:
	return text.replace("'", '"')


def remove_trailing_commas(text: str) -> str:
	return _TRAILING_COMMA_RE.sub(r"\1", text)


def quote_bare_keys(text: str) -> str:
	return _BARE_KEY_RE.sub(r'\1"\2"\3:', text)


REPAIRS: Tuple[Callable[[str], str], ...] = (
	replace_single_quotes,
	remove_trailing_commas,
	quote_bare_keys,
)


def repair(text: str) -> str:
	for step in REPAIRS:
		text = step(text)
	return text


def extract(raw_text: str, expected_shape: ExpectedShape) -> Any:
	candidate = extract_span(strip_code_fence(raw_text or ""), expected_shape)
	try:
		value = json.loads(candidate)
	except json.JSONDecodeError:
		repaired = repair(candidate)
		try:
			value = json.loads(repaired)
		except json.JSONDecodeError as exc:
			logger.debug("Unrepairable model response: %.200s", raw_text)
			raise MalformedResponse("Invalid JSON response from AI.", raw=raw_text) from exc

	if not isinstance(value, _SHAPE_TYPES[expected_shape]):
		raise MalformedResponse(
			f"Expected a JSON {expected_shape}, got {type(value).__name__}.",
			raw=raw_text,
		)
	return value
