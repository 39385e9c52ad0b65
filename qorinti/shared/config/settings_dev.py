# -*- coding: utf-8 -*-
"""
qorinti/shared/config/settings_dev.py

Overrides para entorno de DESARROLLO (dev) usando Pydantic v2.
Hereda de BaseAppSettings y ajusta únicamente valores específicos
del ambiente local (emulador de Firestore, logs legibles).

Autor: Qorinti
Fecha: 2026-10-02
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class DevSettings(BaseAppSettings):
    """Configuración para entorno de desarrollo."""

    # Entorno
    python_env: Literal["development", "test", "production"] = "development"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"
    log_format: Literal["json", "pretty", "plain"] = "plain"  # formato legible en consola

    # Proyecto demo del emulador de Firebase
    gcp_project_id: Optional[str] = Field(default="demo-qorinti", validation_alias="GOOGLE_CLOUD_PROJECT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["DevSettings"]
# Fin del archivo qorinti/shared/config/settings_dev.py
