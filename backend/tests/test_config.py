import pytest
from pydantic import ValidationError
from ticket_service.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SERVICE_NAME", raising=False)
    monkeypatch.delenv("AUDIT_LOG_ENABLED", raising=False)
    settings = get_settings()
    assert settings == Settings()
    assert settings.service_name == "ticket-service"
    assert settings.audit_log_enabled is True


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "box-office")
    monkeypatch.setenv("AUDIT_LOG_ENABLED", "0")
    settings = get_settings()
    assert settings.service_name == "box-office"
    assert settings.audit_log_enabled is False


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("false", False), ("1", True), ("0", False), ("yes", True), ("off", False)],
)
def test_audit_flag_accepts_common_boolean_spellings(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("AUDIT_LOG_ENABLED", raw)
    assert get_settings().audit_log_enabled is expected


def test_invalid_audit_flag_is_a_validation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUDIT_LOG_ENABLED", "sometimes")
    with pytest.raises(ValidationError):
        get_settings()
