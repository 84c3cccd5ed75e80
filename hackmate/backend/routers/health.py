from __future__ import annotations

from fastapi import APIRouter, Request

from hackmate.backend.response import success_response
from hackmate.backend.schemas import ApiEnvelope
from hackmate.backend.services import ai_service


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/summary", response_model=ApiEnvelope)
def get_summary(request: Request):
	data = ai_service.summary()
	data["status"] = "ok" if data["environment"]["is_valid"] else "degraded"
	return success_response(
		request=request,
		data=data,
	)
