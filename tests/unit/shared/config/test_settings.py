import pytest

from decimal_assert.shared.config import get_settings


def _reset_settings_cache():
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.delenv("DECIMAL_ASSERT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DECIMAL_ASSERT_JSON_LOGS", raising=False)

    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "INFO"
    assert s.JSON_LOGS is False
    assert s.MARKER_PROPERTY == "decimal"
    assert s.BIG_INTEGER_TYPE_NAMES == ["BN"]


def test_settings_read_prefixed_environment(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DECIMAL_ASSERT_LOG_LEVEL", "warning")
    monkeypatch.setenv("DECIMAL_ASSERT_MARKER_PROPERTY", "as_decimal")
    monkeypatch.setenv("DECIMAL_ASSERT_BIG_INTEGER_TYPE_NAMES", '["BN", " BigInteger "]')

    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "WARNING"
    assert s.MARKER_PROPERTY == "as_decimal"
    assert s.BIG_INTEGER_TYPE_NAMES == ["BN", "BigInteger"]


def test_settings_are_cached():
    _reset_settings_cache()

    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "name, value",
    [
        ("DECIMAL_ASSERT_LOG_LEVEL", "LOUD"),
        ("DECIMAL_ASSERT_MARKER_PROPERTY", "_decimal"),
        ("DECIMAL_ASSERT_MARKER_PROPERTY", "as decimal"),
        ("DECIMAL_ASSERT_BIG_INTEGER_TYPE_NAMES", "[]"),
        ("DECIMAL_ASSERT_BIG_INTEGER_TYPE_NAMES", '["BN", "  "]'),
    ],
)
def test_settings_reject_invalid_values(monkeypatch, name, value):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv(name, value)

    # When & Then
    with pytest.raises(Exception):
        get_settings()
