# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/models/assignment_models.py

Cadena asignación → conductor_vehículo → conductor.

Autor: Qorinti
Fecha: 2026-10-03
"""

from typing import Optional

from .base_models import DocumentModel


class Assignment(DocumentModel):
    driver_vehicle_link_id: Optional[str] = None


class DriverVehicleLink(DocumentModel):
    driver_id: Optional[str] = None


__all__ = ["Assignment", "DriverVehicleLink"]

# Fin del archivo qorinti/modules/billing/models/assignment_models.py
