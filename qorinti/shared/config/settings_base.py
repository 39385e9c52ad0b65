# -*- coding: utf-8 -*-
"""
qorinti/shared/config/settings_base.py

Base de configuración (Pydantic v2) para las funciones de Qorinti.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Qorinti
Fecha: 2026-10-02
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Qorinti Functions", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8080, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Firebase / Firestore
    # =========================
    gcp_project_id: Optional[str] = Field(default=None, validation_alias="GOOGLE_CLOUD_PROJECT")
    firestore_database: str = Field(default="(default)", validation_alias="FIRESTORE_DATABASE")
    firestore_emulator_host: Optional[str] = Field(default=None, validation_alias="FIRESTORE_EMULATOR_HOST")
    firebase_credentials_path: Optional[str] = Field(
        default=None, validation_alias="GOOGLE_APPLICATION_CREDENTIALS"
    )

    # =========================
    # Entrega de eventos (Eventarc)
    # =========================
    # Lista separada por comas de valores aceptados en `ce-source`; vacío = cualquiera
    events_allowed_sources: str = Field(default="", validation_alias="EVENTS_ALLOWED_SOURCES")

    # =========================
    # Rutas administrativas
    # =========================
    admin_api_token: Optional[SecretStr] = Field(default=None, validation_alias="ADMIN_API_TOKEN")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")
    metrics_enabled: bool = Field(default=True, validation_alias="METRICS_ENABLED")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @field_validator("firestore_emulator_host", "gcp_project_id", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # ===== Utilidad para normalizar orígenes de eventos =====
    def get_allowed_event_sources(self) -> list[str]:
        """Convierte events_allowed_sources en lista; lista vacía acepta cualquier origen."""
        if not self.events_allowed_sources:
            return []
        return [s.strip().strip('"').strip("'") for s in self.events_allowed_sources.split(",") if s.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        if self.is_prod:
            if not self.gcp_project_id:
                raise ValueError("GOOGLE_CLOUD_PROJECT es requerido en producción")
            if self.firestore_emulator_host:
                raise ValueError("FIRESTORE_EMULATOR_HOST no debe definirse en producción")
            token = self.admin_api_token.get_secret_value() if self.admin_api_token else ""
            if len(token) < 32:
                raise ValueError("ADMIN_API_TOKEN debe tener ≥32 caracteres en producción")

        if self.is_dev:
            if not self.firestore_emulator_host and not self.firebase_credentials_path:
                logger.info(
                    "ℹ️ Sin FIRESTORE_EMULATOR_HOST ni GOOGLE_APPLICATION_CREDENTIALS - "
                    "se usarán las credenciales por defecto del entorno"
                )
            if not self.admin_api_token:
                logger.info("ℹ️ ADMIN_API_TOKEN vacío - rutas /admin deshabilitadas")


__all__ = ["BaseAppSettings", "EnvName"]
# Fin del archivo qorinti/shared/config/settings_base.py
