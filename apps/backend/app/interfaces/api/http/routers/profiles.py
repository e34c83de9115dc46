"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/profiles.py
===============================================================================

Name:
    Profiles Router

Responsibilities:
    - Perfil propio (GET/PATCH /profiles/me) con auth JWT.
    - Perfil público por username.
    - Vista agregada (perfil + GitHub + LinkedIn) con degradación parcial.

Collaborators:
    - container.get_*_profile_use_case
    - identity.auth.require_user
    - error_mapping.raise_profile_error
    - schemas.profiles

Notas:
    - /profiles/me se declara ANTES de /profiles/{username} para que "me" no
      se interprete como username.
===============================================================================
"""

from __future__ import annotations

from app.application.usecases import (
    GetAggregatedProfileUseCase,
    GetMyProfileUseCase,
    GetPublicProfileUseCase,
    UpdateMyProfileUseCase,
)
from app.container import (
    get_aggregated_profile_use_case,
    get_my_profile_use_case,
    get_public_profile_use_case,
    get_update_my_profile_use_case,
)
from app.identity.auth import Principal, require_user
from fastapi import APIRouter, Depends, Request

from ..dependencies import request_base_url, to_profile_res
from ..error_mapping import raise_profile_error
from ..schemas.profiles import (
    AggregatedProfileData,
    AggregatedProfileRes,
    CombinedSkillsRes,
    OwnerRes,
    ProfileRes,
    PublicProfileRes,
    UpdateProfileReq,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileRes)
def get_my_profile(
    principal: Principal = Depends(require_user),
    use_case: GetMyProfileUseCase = Depends(get_my_profile_use_case),
):
    result = use_case.execute(principal.user_id)
    if result.error:
        raise_profile_error(
            result.error.code, result.error.message, str(principal.user_id)
        )
    return to_profile_res(result.profile)


@router.patch("/me", response_model=ProfileRes)
def update_my_profile(
    req: UpdateProfileReq,
    principal: Principal = Depends(require_user),
    use_case: UpdateMyProfileUseCase = Depends(get_update_my_profile_use_case),
):
    result = use_case.execute(principal.user_id, req.model_dump(exclude_unset=True))
    if result.error:
        raise_profile_error(
            result.error.code, result.error.message, str(principal.user_id)
        )
    return to_profile_res(result.profile)


@router.get("/{username}", response_model=PublicProfileRes)
def get_public_profile(
    username: str,
    use_case: GetPublicProfileUseCase = Depends(get_public_profile_use_case),
):
    result = use_case.execute(username)
    if result.error:
        raise_profile_error(result.error.code, result.error.message, username)
    return PublicProfileRes(
        user=OwnerRes(username=result.user.username, email=result.user.email),
        profile=to_profile_res(result.profile),
    )


@router.get("/{username}/aggregated", response_model=AggregatedProfileRes)
def get_aggregated_profile(
    username: str,
    request: Request,
    use_case: GetAggregatedProfileUseCase = Depends(get_aggregated_profile_use_case),
):
    result = use_case.execute(username, request_base_url(request))
    if result.error:
        raise_profile_error(result.error.code, result.error.message, username)

    view = result.view
    profile = to_profile_res(view.profile).model_copy(update=view.media_urls)
    return AggregatedProfileRes(
        data=AggregatedProfileData(
            username=view.username,
            profile=profile,
            combined_skills=CombinedSkillsRes(**view.combined_skills),
            github_skills=view.github_skills,
            linkedin_data=view.linkedin_data,
        )
    )
