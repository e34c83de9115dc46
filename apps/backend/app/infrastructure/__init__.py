"""
============================================================
TARJETA CRC — infrastructure/__init__.py
============================================================
Module: infrastructure (Adapters)

Responsibilities:
  - Agrupar los adapters concretos de los puertos del dominio:
      * cache.py         -> SourceCache (in-memory LRU / Redis)
      * repositories/    -> Postgres* / InMemory*
      * services/        -> clientes HTTP de GitHub, Apify y Lingva
      * db/              -> pool de conexiones psycopg

Policy:
  - Sin imports aquí: cada subpaquete se importa por su path
    (evita cargar psycopg/redis/httpx cuando no hacen falta).
============================================================
"""
