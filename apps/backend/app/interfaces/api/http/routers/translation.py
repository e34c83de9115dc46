"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/translation.py
===============================================================================

Name:
    Translation Router

Responsibilities:
    - Traducir texto con memoización persistente (hash + idiomas).
    - Informar el origen del resultado (cache | api | noop).
    - En fallback: 502 con el texto original para que el cliente lo muestre.

Collaborators:
    - container.get_translation_service
    - schemas.sources (TranslateReq / TranslateRes)
===============================================================================
"""

from __future__ import annotations

from app.application.usecases import TranslationService
from app.container import get_translation_service
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..schemas.sources import TranslateReq, TranslateRes

router = APIRouter(tags=["translation"])


@router.post("/translate", response_model=TranslateRes)
def translate(
    req: TranslateReq,
    service: TranslationService = Depends(get_translation_service),
):
    outcome = service.translate(req.text, req.source, req.target)
    if outcome.failed:
        return JSONResponse(
            status_code=502,
            content={"error": "Translation failed", "translation": outcome.text},
        )
    return TranslateRes(translation=outcome.text, source=outcome.origin.value)
