"""
===============================================================================
MÓDULO: Normalización de perfiles de LinkedIn (payload del actor de Apify)
===============================================================================

Responsabilidades:
  - Aplanar el JSON anidado (basic_info, experience[], education[],
    languages[]) a una forma estable con defaults documentados.
  - Derivar el código de idioma (DE/EN/...) y la bio en inglés.

Defaults:
  - Strings ausentes -> "".
  - endDate -> "Present" si la posición es actual.
  - level de idioma -> "Unknown" si no hay proficiency.
  - Fechas -> "<month> <year>" solo si existe el mes; si no, "".
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _section(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _items(value: Any) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, Mapping)]


def format_date(value: Any) -> str:
    date = _section(value)
    month = date.get("month")
    if not month:
        return ""
    return f"{month} {date.get('year', '')}".strip()


def language_code(name: str) -> str:
    lowered = name.lower()
    if "german" in lowered or "deutsch" in lowered:
        return "DE"
    if "english" in lowered:
        return "EN"
    return name[:2].upper()


def _skill_name(skill: Any) -> str:
    if isinstance(skill, str):
        return skill
    return _str(_section(skill).get("name"))


def normalize_linkedin_profile(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Payload crudo del proveedor -> perfil aplanado."""
    basic = _section(raw.get("basic_info"))
    about = _str(basic.get("about"))

    experiences = [
        {
            "title": _str(exp.get("title")),
            "company": _str(exp.get("company")),
            "companyName": _str(exp.get("company")),
            "description": _str(exp.get("description")),
            "location": _str(exp.get("location")),
            "startDate": format_date(exp.get("start_date")),
            "endDate": "Present"
            if exp.get("is_current")
            else format_date(exp.get("end_date")),
        }
        for exp in _items(raw.get("experience"))
    ]

    skills_raw = basic.get("skills")
    skills = [
        {"name": _skill_name(s)}
        for s in (skills_raw if isinstance(skills_raw, list) else [])
    ]

    education = [
        {
            "school": _str(edu.get("school")),
            "schoolName": _str(edu.get("school")),
            "degree": _str(edu.get("degree")),
            "fieldOfStudy": _str(edu.get("field_of_study")),
            "startDate": format_date(edu.get("start_date")),
            "endDate": format_date(edu.get("end_date")),
        }
        for edu in _items(raw.get("education"))
    ]

    languages = []
    for lang in _items(raw.get("languages")):
        name = _str(lang.get("language"))
        proficiency = _str(lang.get("proficiency"))
        languages.append(
            {
                "language": name,
                "name": name,
                "proficiency": proficiency,
                "level": proficiency or "Unknown",
                "code": language_code(name),
                "certificate": "",
            }
        )

    return {
        "name": _str(basic.get("fullname")),
        "headline": _str(basic.get("headline")),
        # R: summary/about/description comparten la misma fuente.
        "summary": about,
        "about": about,
        "description": about,
        "location": _str(basic.get("location")),
        "profile_pic_url": _str(basic.get("profile_picture_url")),
        "background_cover_image_url": _str(basic.get("background_picture_url")),
        "public_identifier": _str(basic.get("public_identifier")),
        "experiences": experiences,
        "skills": skills,
        "education": education,
        "languages": languages,
    }


def english_bio(profile: Mapping[str, Any]) -> str:
    """summary, si no about, si no "<name> - <headline>" (ambos requeridos)."""
    summary = _str(profile.get("summary")).strip()
    if summary:
        return summary
    about = _str(profile.get("about")).strip()
    if about:
        return about
    name = _str(profile.get("name"))
    headline = _str(profile.get("headline"))
    if name and headline:
        return f"{name} - {headline}"
    return ""
