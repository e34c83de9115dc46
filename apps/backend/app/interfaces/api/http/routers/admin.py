"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/admin.py
===============================================================================

Name:
    Admin Router

Responsibilities:
    - Endpoints administrativos: alta/listado/consulta/cambio de rol y baja de usuarios, stats.
    - Enforce de rol admin (JWT).

Collaborators:
    - container.get_*_use_case (admin)
    - identity.auth.require_admin
    - error_mapping.raise_admin_error
    - schemas.admin
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from app.application.usecases import (
    DeleteUserUseCase,
    GetAdminStatsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    ProvisionUserUseCase,
    UpdateUserUseCase,
)
from app.container import (
    get_admin_stats_use_case,
    get_delete_user_use_case,
    get_list_users_use_case,
    get_provision_user_use_case,
    get_update_user_use_case,
    get_user_use_case,
)
from app.identity.auth import Principal, require_admin
from fastapi import APIRouter, Depends, Response, status

from ..dependencies import to_user_res
from ..error_mapping import raise_admin_error
from ..schemas.admin import (
    AdminStatsRes,
    CreateUserReq,
    UpdateUserReq,
    UserRes,
    UsersListRes,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/users", response_model=UserRes, status_code=status.HTTP_201_CREATED)
def create_user(
    req: CreateUserReq,
    use_case: ProvisionUserUseCase = Depends(get_provision_user_use_case),
    _admin: Principal = Depends(require_admin),
):
    result = use_case.execute(username=req.username, email=req.email, role=req.role)
    if result.error:
        raise_admin_error(result.error.code, result.error.message, req.username)
    return to_user_res(result.user)


@router.get("/users", response_model=UsersListRes)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
    _admin: Principal = Depends(require_admin),
):
    result = use_case.execute()
    return UsersListRes(users=[to_user_res(u) for u in result.users])


@router.get("/users/{user_id}", response_model=UserRes)
def get_user(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(get_user_use_case),
    _admin: Principal = Depends(require_admin),
):
    result = use_case.execute(user_id)
    if result.error:
        raise_admin_error(result.error.code, result.error.message, str(user_id))
    return to_user_res(result.user)


@router.patch("/users/{user_id}", response_model=UserRes)
def update_user(
    user_id: UUID,
    req: UpdateUserReq,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
    _admin: Principal = Depends(require_admin),
):
    result = use_case.execute(user_id, role=req.role, is_active=req.is_active)
    if result.error:
        raise_admin_error(result.error.code, result.error.message, str(user_id))
    return to_user_res(result.user)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(
    user_id: UUID,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
    _admin: Principal = Depends(require_admin),
):
    result = use_case.execute(user_id)
    if result.error:
        raise_admin_error(result.error.code, result.error.message, str(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/stats", response_model=AdminStatsRes)
def admin_stats(
    use_case: GetAdminStatsUseCase = Depends(get_admin_stats_use_case),
    _admin: Principal = Depends(require_admin),
):
    stats = use_case.execute()
    return AdminStatsRes(
        users=stats.users, active_users=stats.active_users, profiles=stats.profiles
    )
