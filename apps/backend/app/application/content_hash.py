"""
===============================================================================
MÓDULO: Content Hash — clave de memoización de traducciones
===============================================================================

Responsabilidades:
  - Computar SHA-256 (hex, 64 chars) sobre el texto UTF-8 a traducir.

Colaboradores:
  - application/usecases/sources/translation.py: clave (hash, source, target)
  - infrastructure/repositories/*/translation.py: índice único por esa clave

Decisiones de diseño:
  - Función pura (sin IO).
  - Sin normalización: dos textos que difieren solo en espacios son
    traducciones distintas (el proveedor también los trata distinto).
===============================================================================
"""

from __future__ import annotations

import hashlib


def compute_text_hash(text: str) -> str:
    """SHA-256 hex digest del texto tal cual llega."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
