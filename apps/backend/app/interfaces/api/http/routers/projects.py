"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/projects.py
===============================================================================

Name:
    Projects Router

Responsibilities:
    - Listados por username / user_id (auth opcional: dueño y admin ven
      también los ocultos) y del usuario autenticado.
    - CRUD de un proyecto con chequeo de dueño.
    - Reorder y visibilidad en lote.

Collaborators:
    - container.get_*_project(s)_use_case
    - identity.auth.require_user / optional_user
    - error_mapping.raise_project_error
    - schemas.projects

Notas:
    - /projects/me se declara ANTES de /projects/{project_id}.
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from app.application.usecases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListMyProjectsUseCase,
    ListUserProjectsUseCase,
    ReorderProjectsUseCase,
    SetProjectVisibilityUseCase,
    UpdateProjectUseCase,
)
from app.container import (
    get_create_project_use_case,
    get_delete_project_use_case,
    get_list_my_projects_use_case,
    get_list_user_projects_use_case,
    get_project_use_case,
    get_reorder_projects_use_case,
    get_set_project_visibility_use_case,
    get_update_project_use_case,
)
from app.identity.auth import Principal, optional_user, require_user
from fastapi import APIRouter, Depends, Response, status

from ..dependencies import to_project_actor, to_project_res
from ..error_mapping import raise_project_error
from ..schemas.projects import (
    CreateProjectReq,
    ProjectRes,
    ProjectsListRes,
    ReorderProjectsReq,
    SetProjectVisibilityReq,
    UpdateProjectReq,
)

router = APIRouter(prefix="/projects", tags=["projects"])


def _list_res(projects) -> ProjectsListRes:
    return ProjectsListRes(
        results=len(projects), projects=[to_project_res(p) for p in projects]
    )


@router.get("/me", response_model=ProjectsListRes)
def list_my_projects(
    principal: Principal = Depends(require_user),
    use_case: ListMyProjectsUseCase = Depends(get_list_my_projects_use_case),
):
    return _list_res(use_case.execute(principal.user_id).projects)


@router.get("/user/{user_id}", response_model=ProjectsListRes)
def list_projects_by_user_id(
    user_id: UUID,
    principal: Principal | None = Depends(optional_user),
    use_case: ListUserProjectsUseCase = Depends(get_list_user_projects_use_case),
):
    result = use_case.execute(user_id=user_id, actor=to_project_actor(principal))
    if result.error:
        raise_project_error(result.error)
    return _list_res(result.projects)


@router.get("/username/{username}", response_model=ProjectsListRes)
def list_projects_by_username(
    username: str,
    principal: Principal | None = Depends(optional_user),
    use_case: ListUserProjectsUseCase = Depends(get_list_user_projects_use_case),
):
    result = use_case.execute(username=username, actor=to_project_actor(principal))
    if result.error:
        raise_project_error(result.error)
    return _list_res(result.projects)


@router.get("/{project_id}", response_model=ProjectRes)
def get_project(
    project_id: UUID,
    principal: Principal | None = Depends(optional_user),
    use_case: GetProjectUseCase = Depends(get_project_use_case),
):
    result = use_case.execute(project_id, to_project_actor(principal))
    if result.error:
        raise_project_error(result.error)
    return to_project_res(result.project)


@router.post("", response_model=ProjectRes, status_code=status.HTTP_201_CREATED)
def create_project(
    req: CreateProjectReq,
    principal: Principal = Depends(require_user),
    use_case: CreateProjectUseCase = Depends(get_create_project_use_case),
):
    result = use_case.execute(principal.user_id, req.model_dump())
    if result.error:
        raise_project_error(result.error)
    return to_project_res(result.project)


@router.patch("/{project_id}", response_model=ProjectRes)
def update_project(
    project_id: UUID,
    req: UpdateProjectReq,
    principal: Principal = Depends(require_user),
    use_case: UpdateProjectUseCase = Depends(get_update_project_use_case),
):
    result = use_case.execute(
        project_id, to_project_actor(principal), req.model_dump(exclude_unset=True)
    )
    if result.error:
        raise_project_error(result.error)
    return to_project_res(result.project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_project(
    project_id: UUID,
    principal: Principal = Depends(require_user),
    use_case: DeleteProjectUseCase = Depends(get_delete_project_use_case),
):
    result = use_case.execute(project_id, to_project_actor(principal))
    if result.error:
        raise_project_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/reorder", response_model=ProjectsListRes)
def reorder_projects(
    req: ReorderProjectsReq,
    principal: Principal = Depends(require_user),
    use_case: ReorderProjectsUseCase = Depends(get_reorder_projects_use_case),
):
    result = use_case.execute(
        to_project_actor(principal),
        [(item.id, item.order) for item in req.project_orders],
    )
    if result.error:
        raise_project_error(result.error)
    return _list_res(result.projects)


@router.post("/visibility", response_model=ProjectsListRes)
def set_project_visibility(
    req: SetProjectVisibilityReq,
    principal: Principal = Depends(require_user),
    use_case: SetProjectVisibilityUseCase = Depends(
        get_set_project_visibility_use_case
    ),
):
    result = use_case.execute(
        to_project_actor(principal),
        [(item.id, item.is_visible_in_portfolio) for item in req.projects],
    )
    if result.error:
        raise_project_error(result.error)
    return _list_res(result.projects)
