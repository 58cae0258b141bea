import pytest

pytest_plugins = ["decimal_assert.pytest_plugin"]


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("DECIMAL_ASSERT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DECIMAL_ASSERT_JSON_LOGS", "false")
    monkeypatch.delenv("DECIMAL_ASSERT_CONFIGURE_LOGGING", raising=False)
    monkeypatch.delenv("DECIMAL_ASSERT_MARKER_PROPERTY", raising=False)
    monkeypatch.delenv("DECIMAL_ASSERT_BIG_INTEGER_TYPE_NAMES", raising=False)

    from decimal_assert.shared.config import get_settings

    get_settings.cache_clear()


class BN:
    """Stand-in for a bn.js style big integer: only its class name is known."""

    def __init__(self, digits: str):
        self._digits = digits

    def __str__(self) -> str:
        return self._digits

    def __repr__(self) -> str:
        return f"BN({self._digits})"


@pytest.fixture
def bn():
    return BN
