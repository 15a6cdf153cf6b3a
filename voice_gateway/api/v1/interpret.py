"""POST /v1/interpret - answer a business question against a snapshot"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request
from fastapi.encoders import jsonable_encoder

from voice_gateway.api.v1.schemas import InterpretRequest, InterpretResponse
from voice_gateway.api.dependencies import get_request_id
from voice_gateway.config import settings
from voice_gateway.domain.exceptions import UnsupportedLocaleError
from voice_gateway.domain.interpreter import interpret
from voice_gateway.infrastructure.observability.metrics import record_interpretation
from voice_gateway.infrastructure.observability.logging import log_interpretation

router = APIRouter()


@router.post("/interpret", response_model=InterpretResponse)
def interpret_command(request_body: InterpretRequest, request: Request):
    """
    Interpret a transcript and return the spoken answer.

    Flow:
    1. Convert the submitted snapshot to domain records
    2. Classify, extract, resolve and compute the answer
    3. Record metrics and logs
    4. Return display text, speech text and structured data
    """
    start_time = time.time()
    request_id = get_request_id(request)
    locale = request_body.locale or settings.default_locale

    try:
        result = interpret(
            request_body.command,
            request_body.snapshot.to_domain(),
            locale,
            now=request_body.now,
        )

        duration = time.time() - start_time
        record_interpretation(locale, result.intent.type.value, result.answered, duration)
        log_interpretation(request_id, locale, result.intent.type.value, result.intent.confidence, duration * 1000)

        return InterpretResponse(
            response=result.response,
            speech=result.speech,
            intent=result.intent.type.value,
            confidence=result.intent.confidence,
            answered=result.answered,
            data=jsonable_encoder(result.data) if result.data is not None else None,
        )

    except UnsupportedLocaleError as e:
        logging.warning(f"Unsupported locale: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
