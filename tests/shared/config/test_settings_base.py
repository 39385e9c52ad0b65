# -*- coding: utf-8 -*-
from qorinti.shared.config.settings_base import BaseAppSettings


def test_allowed_event_sources_parsing(monkeypatch):
    monkeypatch.setenv(
        "EVENTS_ALLOWED_SOURCES",
        ' "//firestore.googleapis.com/projects/p/databases/(default)" , other ,',
    )
    s = BaseAppSettings()
    assert s.get_allowed_event_sources() == [
        "//firestore.googleapis.com/projects/p/databases/(default)",
        "other",
    ]


def test_allowed_event_sources_empty_accepts_any():
    s = BaseAppSettings()
    assert s.get_allowed_event_sources() == []


def test_blank_emulator_host_is_none(monkeypatch):
    monkeypatch.setenv("FIRESTORE_EMULATOR_HOST", "   ")
    s = BaseAppSettings()
    assert s.firestore_emulator_host is None


def test_port_reads_cloud_run_variable(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    s = BaseAppSettings()
    assert s.app_port == 9090
# Fin del archivo tests/shared/config/test_settings_base.py
