# -*- coding: utf-8 -*-
"""
tests/integration/__init__.py

Tests de integración contra el emulador de Firestore.
Se omiten si FIRESTORE_EMULATOR_HOST no está definido.

Autor: Qorinti
Fecha: 2026-10-09
"""
