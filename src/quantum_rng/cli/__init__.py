"""Capa CLI (Typer + Rich).

No contiene lógica de negocio: delega en `quantum_rng.core.services`.
"""
