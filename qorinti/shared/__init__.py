# -*- coding: utf-8 -*-
"""
qorinti/shared/__init__.py

Componentes compartidos: configuración, acceso a Firestore y utilidades.

Autor: Qorinti
Fecha: 2026-10-02
"""
