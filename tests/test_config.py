from loaner.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOANER_LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.log_level == "INFO"
    assert s.default_currency == ""
    assert s.api_url == "http://localhost:8000"


def test_env_override(monkeypatch):
    monkeypatch.setenv("LOANER_DEFAULT_CURRENCY", "€")
    monkeypatch.setenv("LOANER_REQUEST_TIMEOUT", "5")
    s = Settings(_env_file=None)
    assert s.default_currency == "€"
    assert s.request_timeout == 5.0
