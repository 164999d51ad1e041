import pytest
from pydantic import ValidationError

from jobintake.config import Settings


def test_port_is_read_from_port_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert Settings().app_port == 8080


def test_port_defaults_to_5000(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("APP_PORT", raising=False)
    assert Settings(_env_file=None).app_port == 5000


def test_upload_limit_defaults_to_five_megabytes() -> None:
    assert Settings(_env_file=None).max_upload_bytes == 5 * 1024 * 1024


def test_rejects_unknown_app_env() -> None:
    with pytest.raises(ValidationError):
        Settings(app_env="qa")


def test_cors_origin_list_splits_and_strips() -> None:
    settings = Settings(cors_origins=" http://a.test, ,http://b.test ")
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]
