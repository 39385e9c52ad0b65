# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/commissions/driver_resolver.py

Resuelve el conductor de un pago: Assignment → DriverVehicleLink → driverId.

Autor: Qorinti
Fecha: 2026-10-05
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from qorinti.shared.firestore.store import DocumentStore
from qorinti.modules.billing.repositories import (
    AssignmentRepository,
    DriverVehicleLinkRepository,
)


@dataclass(frozen=True)
class DriverResolution:
    driver_id: Optional[str] = None
    # Eslabón faltante cuando no se pudo resolver
    missing: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return bool(self.driver_id)


async def resolve_driver_id(
    store: DocumentStore,
    assignment_id: str,
    *,
    assignment_repo: Optional[AssignmentRepository] = None,
    link_repo: Optional[DriverVehicleLinkRepository] = None,
) -> DriverResolution:
    _assignment_repo = assignment_repo or AssignmentRepository()
    _link_repo = link_repo or DriverVehicleLinkRepository()

    assignment = await _assignment_repo.get(store, assignment_id)
    if assignment is None:
        return DriverResolution(missing="assignment_not_found")
    if not assignment.driver_vehicle_link_id:
        return DriverResolution(missing="assignment_without_link")

    link = await _link_repo.get(store, assignment.driver_vehicle_link_id)
    if link is None:
        return DriverResolution(missing="driver_vehicle_link_not_found")
    if not link.driver_id:
        return DriverResolution(missing="link_without_driver")

    return DriverResolution(driver_id=link.driver_id)


__all__ = ["DriverResolution", "resolve_driver_id"]

# Fin del archivo qorinti/modules/billing/facades/commissions/driver_resolver.py
