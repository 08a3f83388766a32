import pytest
from pydantic import ValidationError

from tickboard.config import DEFAULT_PORT, Settings


def load(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    assert load().port == 8081


def test_port_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert load().port == DEFAULT_PORT == 3000


def test_port_defaults_when_empty(monkeypatch):
    monkeypatch.setenv("PORT", "")
    assert load().port == 3000


@pytest.mark.parametrize("value", ["abc", "-1", "70000"])
def test_invalid_port_is_rejected(monkeypatch, value):
    monkeypatch.setenv("PORT", value)
    with pytest.raises(ValidationError):
        load()


def test_listens_on_all_interfaces_by_default(monkeypatch):
    monkeypatch.delenv("HOST", raising=False)
    assert load().host == "0.0.0.0"
