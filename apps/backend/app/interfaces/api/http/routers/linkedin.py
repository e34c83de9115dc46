"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/linkedin.py
===============================================================================

Name:
    LinkedIn Router

Responsibilities:
    - Exponer el perfil de LinkedIn normalizado + bio en/de.

Collaborators:
    - container.get_linkedin_source
    - schemas.sources.LinkedInProfileRes

Notas:
    - Sin APIFY_TOKEN: ConfigurationMissingError -> 500 con mensaje claro.
    - Falla del actor: SourceUnavailableError -> 502.
===============================================================================
"""

from __future__ import annotations

from app.application.usecases import LinkedInSource
from app.container import get_linkedin_source
from fastapi import APIRouter, Depends

from ..dependencies import validate_source_username
from ..schemas.sources import LinkedInProfileRes

router = APIRouter(prefix="/linkedin", tags=["linkedin"])


@router.get("/profile/{username}", response_model=LinkedInProfileRes)
def get_linkedin_profile(
    username: str, source: LinkedInSource = Depends(get_linkedin_source)
):
    return source.fetch_profile_data(validate_source_username(username))
