# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/__init__.py

Módulo Billing: comprobantes, comisiones y saldo de conductores,
derivados de la creación de documentos en Firestore.

Autor: Qorinti
Fecha: 2026-10-03
"""
