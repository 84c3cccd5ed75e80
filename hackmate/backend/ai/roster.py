from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from hackmate.backend import config


@dataclass(frozen=True)
class ModelRoster:
	"""Ordered gateway model ids; the walker tries them strictly in this order."""

	models: Tuple[str, ...]

	def __post_init__(self) -> None:
		if not self.models:
			raise ValueError("Model roster must name at least one model.")

	@classmethod
	def of(cls, models: Iterable[str]) -> "ModelRoster":
		return cls(models=tuple(models))

	@classmethod
	def from_config(cls) -> "ModelRoster":
		return cls.of(config.model_roster())

	def __iter__(self) -> Iterator[str]:
		return iter(self.models)

	def __len__(self) -> int:
		return len(self.models)
