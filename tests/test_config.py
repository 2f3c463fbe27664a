from core.config import Settings


def test_server_address_comes_from_environment(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")

    settings = Settings()

    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 9001


def test_server_address_defaults(monkeypatch):
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8000
