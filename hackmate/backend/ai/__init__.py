from hackmate.backend.ai.cache import ResponseCache, fingerprint
from hackmate.backend.ai.errors import (
	AIError,
	AllModelsFailed,
	GatewayError,
	InvalidIntent,
	InvalidPayload,
	MalformedResponse,
	RateLimited,
)
from hackmate.backend.ai.gateway import FixedCooldown, GatewayClient
from hackmate.backend.ai.pipeline import AIPipeline, PipelineResult
from hackmate.backend.ai.processor import ActionProcessor
from hackmate.backend.ai.roster import ModelRoster
from hackmate.backend.ai.types import ActionResult, Attempt, Intent
from hackmate.backend.ai.walker import FallbackWalker

__all__ = [
	"AIError",
	"AIPipeline",
	"ActionProcessor",
	"ActionResult",
	"AllModelsFailed",
	"Attempt",
	"FallbackWalker",
	"FixedCooldown",
	"GatewayClient",
	"GatewayError",
	"Intent",
	"InvalidIntent",
	"InvalidPayload",
	"MalformedResponse",
	"ModelRoster",
	"PipelineResult",
	"RateLimited",
	"ResponseCache",
	"fingerprint",
]
