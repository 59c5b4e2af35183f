"""Configuración de la aplicación leída de variables de entorno.

Todas las variables usan el prefijo ``TAREAS_`` y son opcionales; un valor
mal formado se ignora y se usa el valor por defecto.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "TAREAS"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on", "si", "sí"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True, slots=True)
class Settings:
    """Parámetros de arranque de la aplicación."""

    app_name: str = "Gestor de tareas"
    log_level: str = "INFO"

    # El tema inicial es claro salvo que se pida lo contrario.
    dark_theme: bool = False

    window_width: int = 900
    window_height: int = 560


def get_settings() -> Settings:
    """Construye ``Settings`` a partir del entorno actual."""

    defaults = Settings()
    return Settings(
        app_name=_env(_k("APP_NAME"), defaults.app_name),
        log_level=_env(_k("LOG_LEVEL"), defaults.log_level).upper(),
        dark_theme=_env_bool(_k("DARK_THEME"), defaults.dark_theme),
        window_width=_env_int(_k("WINDOW_WIDTH"), defaults.window_width),
        window_height=_env_int(_k("WINDOW_HEIGHT"), defaults.window_height),
    )


__all__ = ["ENV_PREFIX", "Settings", "get_settings"]
