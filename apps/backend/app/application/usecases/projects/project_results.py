"""
===============================================================================
PROJECT USE CASE RESULTS
===============================================================================

Responsibilities:
    - ProjectErrorCode / ProjectError (resource: "Project" | "User")
    - ProjectResult, ProjectListResult, DeleteProjectResult
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import Project


class ProjectErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class ProjectError:
    code: ProjectErrorCode
    message: str
    resource: str = "Project"
    identifier: str | None = None


@dataclass
class ProjectResult:
    project: Project | None = None
    error: ProjectError | None = None


@dataclass
class ProjectListResult:
    projects: List[Project] = field(default_factory=list)
    error: ProjectError | None = None


@dataclass
class DeleteProjectResult:
    deleted: bool
    error: ProjectError | None = None
