import pytest

from basic_auth_platform.config import _get_bool, settings


@pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("ON", True), ("false", False), ("0", False), ("no", False)])
def test_get_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("BASICAUTH_TEST_FLAG", raw)
    assert _get_bool("BASICAUTH_TEST_FLAG", not expected) is expected


def test_get_bool_default(monkeypatch):
    monkeypatch.delenv("BASICAUTH_TEST_FLAG", raising=False)
    assert _get_bool("BASICAUTH_TEST_FLAG", True) is True


def test_settings_only_hold_startup_toggle():
    # backend selection is read by the storage factory at call time
    assert isinstance(settings.DEFER_DATASOURCE_INIT, bool)
    assert not hasattr(settings, "STORAGE_BACKEND")
    assert not hasattr(settings, "DB_DSN")
