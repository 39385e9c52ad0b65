# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/triggers/__init__.py

Triggers "documento creado" de Firestore: registro, decodificación de
CloudEvents y handlers del módulo Billing.

Autor: Qorinti
Fecha: 2026-10-07
"""

from .registry import TriggerRegistry, TriggerDispatchError, TriggerBinding
from .events import EventDecodingError, parse_cloudevent, to_document_created_event
from .handlers import register_billing_triggers, get_trigger_registry

__all__ = [
    "TriggerRegistry",
    "TriggerDispatchError",
    "TriggerBinding",
    "EventDecodingError",
    "parse_cloudevent",
    "to_document_created_event",
    "register_billing_triggers",
    "get_trigger_registry",
]

# Fin del archivo qorinti/modules/billing/triggers/__init__.py
