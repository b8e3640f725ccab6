import pytest


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BMR_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("BMR_DEFAULT_SEX", raising=False)
    monkeypatch.delenv("BMR_DEFAULT_ACTIVITY", raising=False)
