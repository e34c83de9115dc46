"""
===============================================================================
APPLICATION LAYER (Public API / Exports)
===============================================================================

Expone los puntos de entrada estables de la capa de aplicación:
  - normalizers: transformaciones puras de payloads de GitHub / LinkedIn
  - content_hash: clave de memoización de traducciones

Nota:
  - Los casos de uso se importan desde `usecases/` subdirectories.
===============================================================================
"""

from .content_hash import compute_text_hash  # noqa: F401

__all__ = ["compute_text_hash"]
