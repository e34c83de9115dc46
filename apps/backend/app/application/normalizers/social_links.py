"""Extracción de identificadores de proveedor desde social links."""

from __future__ import annotations

from urllib.parse import urlparse


def _path_segments(value: str) -> list[str]:
    value = value.strip()
    if "://" not in value and not value.startswith("www."):
        # R: usuario "pelado" (sin URL).
        return [s for s in value.split("/") if s]
    if value.startswith("www."):
        value = f"https://{value}"
    return [s for s in urlparse(value).path.split("/") if s]


def github_identifier(link: str | None) -> str | None:
    """Último segmento no vacío del path ("https://github.com/jdoe/" -> "jdoe")."""
    if not link or not link.strip():
        return None
    segments = _path_segments(link)
    return segments[-1] if segments else None


def linkedin_identifier(link: str | None) -> str | None:
    """Segmento posterior a /in/ ("https://linkedin.com/in/jane-doe" -> "jane-doe")."""
    if not link or not link.strip():
        return None
    segments = _path_segments(link)
    if "in" in segments:
        idx = segments.index("in")
        if idx + 1 < len(segments):
            return segments[idx + 1]
        return None
    return segments[-1] if segments else None
