"""Configuración del SDK.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el transporte HTTP y la CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from quantum_rng import __version__

DEFAULT_BASE_URL = "https://quantum-random-api.onrender.com/api/v1/random"
APP_DIR_NAME = "quantum-rng"


def get_user_config_dir() -> Path:
    """Carpeta `quantum-rng` dentro de la ruta de configuración del sistema."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env del usuario (python-dotenv).

    Las claves existentes se reescriben en su sitio; el resto del fichero se conserva.
    """

    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.write_text("# quantum-rng user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is None:
            continue
        set_key(str(env_path), key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del SDK.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUANTUM_RNG_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="API key del servicio de aleatoriedad cuántica (cabecera x-api-key).",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Endpoint que devuelve el sobre JSON con los enteros.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"QuantumRNG-Python-SDK/{__version__}",
        min_length=1,
        description="User-Agent enviado al servicio.",
    )
