"""Servicios del Core (fachada del SDK)."""
