# -*- coding: utf-8 -*-
"""
qorinti/shared/admin_auth.py

Autenticación por token para las rutas administrativas (/admin/...).

Uso:
    from qorinti.shared.admin_auth import AdminAuth, require_admin_token

Autor: Qorinti
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

logger = logging.getLogger(__name__)


async def require_admin_token(
    authorization: Annotated[str | None, Header()] = None,
) -> bool:
    """
    Valida `Authorization: Bearer <token>` contra ADMIN_API_TOKEN.

    Raises:
        HTTPException 401: sin header o con formato inválido.
        HTTPException 403: token incorrecto.
        HTTPException 500: ADMIN_API_TOKEN no configurado.
    """
    from qorinti.shared.config.config_loader import get_settings

    settings = get_settings()

    if not settings.admin_api_token:
        logger.error("admin_token_not_configured: ADMIN_API_TOKEN must be set for /admin routes")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Admin token not configured",
        )

    if not authorization:
        logger.warning("admin_auth_missing_header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.warning("admin_auth_invalid_format")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization format. Use: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    expected = settings.admin_api_token.get_secret_value()
    if not secrets.compare_digest(parts[1], expected):
        logger.warning("admin_auth_invalid_token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin token",
        )

    return True


AdminAuth = Annotated[bool, Depends(require_admin_token)]


__all__ = ["require_admin_token", "AdminAuth"]
