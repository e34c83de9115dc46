"""
===============================================================================
MÓDULO: Normalización de repos de GitHub (skills + proyectos)
===============================================================================

Responsabilidades:
  - Filtrar repos públicos (sin forks ni privados).
  - Extraer skills: lenguajes conocidos vs. otras skills, por frecuencia.
  - Transformar un repo en un "project" bilingüe (en/de) para el portfolio.

Colaboradores:
  - application/usecases/sources/github_source.py (cachea el resultado)

Decisiones:
  - Funciones puras; el input es el JSON crudo de la API REST de GitHub.
  - Ranking estable: a igual frecuencia, gana el primero en aparecer.
===============================================================================
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Any, Iterable, Mapping

# Allow-list de lenguajes de programación (comparación exacta, case-sensitive).
PROGRAMMING_LANGUAGES: frozenset[str] = frozenset(
    {
        "JavaScript",
        "TypeScript",
        "Python",
        "Java",
        "Kotlin",
        "C#",
        "C++",
        "C",
        "Swift",
        "Go",
        "Rust",
        "PHP",
        "Ruby",
        "Dart",
        "Scala",
        "R",
        "Objective-C",
        "Shell",
        "PowerShell",
        "HTML",
        "CSS",
        "SQL",
        "Perl",
        "Lua",
        "Haskell",
        "F#",
    }
)

MAX_PROGRAMMING_LANGUAGES = 15
MAX_OTHER_SKILLS = 20
MAX_PROJECT_TOPICS = 3

_YOUTUBE_RE = re.compile(r"https://www\.youtube\.com/watch\?v=[\w-]+")
_WORD_START_RE = re.compile(r"\b\w")

Repo = Mapping[str, Any]


def filter_public_repos(repos: Iterable[Repo]) -> list[Repo]:
    """Excluye forks y privados."""
    return [r for r in repos if not r.get("fork") and not r.get("private")]


def filter_user_repos(repos: Iterable[Repo]) -> list[Repo]:
    """Vista pública de repos: sin forks, sin privados, sin 'fork' en el nombre."""
    return [
        r
        for r in filter_public_repos(repos)
        if "fork" not in str(r.get("name") or "").lower()
    ]


def filter_admin_repos(repos: Iterable[Repo]) -> list[Repo]:
    """Vista de administración: conserva forks, excluye privados."""
    return [r for r in repos if not r.get("private")]


def format_topic(topic: str) -> str:
    """'machine-learning' -> 'Machine Learning' (solo la primera letra de cada palabra)."""
    words = topic.replace("-", " ").split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words)


def _ranked(counts: Counter, limit: int) -> list[str]:
    # R: sorted es estable y Counter preserva orden de inserción.
    return [name for name, _ in sorted(counts.items(), key=lambda kv: -kv[1])][:limit]


def extract_skills(repos: Iterable[Repo]) -> dict[str, list[str]]:
    """
    Cuenta lenguajes y topics de los repos públicos.

    Returns:
        {"programmingLanguages": [...<=15], "otherSkills": [...<=20]}
    """
    languages: Counter = Counter()
    others: Counter = Counter()

    for repo in filter_public_repos(repos):
        tokens = [format_topic(t) for t in (repo.get("topics") or []) if t]
        if repo.get("language"):
            tokens.append(repo["language"])

        for token in tokens:
            if token in PROGRAMMING_LANGUAGES:
                languages[token] += 1
            else:
                others[token] += 1

    return {
        "programmingLanguages": _ranked(languages, MAX_PROGRAMMING_LANGUAGES),
        "otherSkills": _ranked(others, MAX_OTHER_SKILLS),
    }


def _title_from_name(name: str) -> str:
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), name.replace("-", " "))


def repo_to_project(repo: Repo) -> dict[str, Any] | None:
    """
    Repo -> project del portfolio. None para forks o privados.

    - title/description bilingües (en/de)
    - tags: lenguaje + hasta 3 topics formateados (default ["Project"])
    - videoUrl si la descripción trae un link de YouTube
    """
    if repo.get("fork") or repo.get("private"):
        return None

    name = str(repo.get("name") or "")
    language = repo.get("language")
    description = repo.get("description") or ""

    tags: list[str] = []
    if language:
        tags.append(language)
    tags.extend(
        format_topic(t) for t in (repo.get("topics") or [])[:MAX_PROJECT_TOPICS]
    )

    title = _title_from_name(name)
    project: dict[str, Any] = {
        "title": {"en": title, "de": title},
        "description": {
            "en": description or f"A {language or 'software'} project",
            "de": description or f"Ein {language or 'Software'} Projekt",
        },
        "tags": tags or ["Project"],
        "liveUrl": "#",
        "repoUrl": repo.get("html_url"),
        "lastUpdated": repo.get("pushed_at"),
        "stars": repo.get("stargazers_count", 0),
        "forks": repo.get("forks_count", 0),
        "isFeatured": False,
    }

    match = _YOUTUBE_RE.search(description)
    if match:
        project["videoUrl"] = match.group(0)

    return project


def repos_to_projects(repos: Iterable[Repo]) -> list[dict[str, Any]]:
    return [p for p in (repo_to_project(r) for r in repos) if p is not None]
