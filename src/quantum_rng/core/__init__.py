"""Core del SDK: configuración, dominio, contratos y servicios.

El Core no depende de httpx ni de la CLI; los adaptadores implementan sus contratos.
"""
