"""POST /v1/speech - rewrite currency amounts in text as spoken words"""

from fastapi import APIRouter

from voice_gateway.api.v1.schemas import SpeechRequest, SpeechResponse
from voice_gateway.config import settings
from voice_gateway.domain.interpreter import speak_text

router = APIRouter()


@router.post("/speech", response_model=SpeechResponse)
def format_speech(request_body: SpeechRequest):
    """Used by hosts that compose their own answers but want the same currency wording"""
    return SpeechResponse(speech=speak_text(request_body.text, request_body.locale or settings.default_locale))
