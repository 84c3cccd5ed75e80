from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from hackmate.backend.response import success_response
from hackmate.backend.schemas import AIModelsData, AIRequest, AIResultData, ApiEnvelope
from hackmate.backend.services import ai_service


router = APIRouter(prefix="/api/ai", tags=["ai"])


def _http_error(exc: ai_service.AIServiceError) -> HTTPException:
	headers = None
	if exc.retry_after is not None:
		headers = {"Retry-After": str(exc.retry_after)}
	return HTTPException(
		status_code=exc.status_code,
		detail={
			"code": exc.code,
			"message": exc.message,
			"evidence": exc.evidence,
			"retry_after": exc.retry_after,
		},
		headers=headers,
	)


@router.post("", response_model=ApiEnvelope)
def run_intent(request: Request, payload: AIRequest):
	try:
		result = ai_service.handle(intent=payload.intent, payload=payload.payload)
	except ai_service.AIServiceError as exc:
		raise _http_error(exc) from exc
	data = AIResultData.model_validate(result)
	return success_response(request=request, data=data.model_dump())


@router.get("/models", response_model=ApiEnvelope)
def models(request: Request):
	catalog = AIModelsData.model_validate(ai_service.list_models())
	return success_response(request=request, data=catalog.model_dump())
