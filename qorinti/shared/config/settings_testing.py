# -*- coding: utf-8 -*-
"""
qorinti/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, proyecto ficticio y token
administrativo conocido para las pruebas de rutas.

Autor: Qorinti
Fecha: 2026-10-02
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "test"

    # --- Logging en test: menos ruido ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "pretty", "plain"] = "pretty"

    # --- Firestore: nunca apuntar a un proyecto real ---
    gcp_project_id: Optional[str] = Field(default="demo-qorinti-test", validation_alias="GOOGLE_CLOUD_PROJECT")

    # --- Rutas /admin habilitadas con token dummy ---
    admin_api_token: Optional[SecretStr] = Field(
        default=SecretStr("test-admin-token"), validation_alias="ADMIN_API_TOKEN"
    )

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo qorinti/shared/config/settings_testing.py
