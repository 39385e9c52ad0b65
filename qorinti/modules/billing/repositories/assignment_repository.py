# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/repositories/assignment_repository.py

Repositorios de `assignments` y `driver_vehicle_links`.

Autor: Qorinti
Fecha: 2026-10-03
"""

from qorinti.shared.firestore.repository import BaseRepository
from qorinti.modules.billing.models import Assignment, DriverVehicleLink


class AssignmentRepository(BaseRepository[Assignment]):
    collection = "assignments"

    def __init__(self) -> None:
        super().__init__(Assignment)


class DriverVehicleLinkRepository(BaseRepository[DriverVehicleLink]):
    collection = "driver_vehicle_links"

    def __init__(self) -> None:
        super().__init__(DriverVehicleLink)

# Fin del archivo qorinti/modules/billing/repositories/assignment_repository.py
