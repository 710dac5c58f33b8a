import pytest


@pytest.fixture(autouse=True)
def no_config_override(monkeypatch):
    monkeypatch.delenv("HUFFPRESS_CONFIG", raising=False)
