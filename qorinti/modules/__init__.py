# -*- coding: utf-8 -*-
"""
qorinti/modules/__init__.py

Módulos de negocio de Qorinti.
"""
