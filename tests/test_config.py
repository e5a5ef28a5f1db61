from record_store_api.app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PROJECT_NAME", "DEBUG", "LOG_LEVEL", "LOG_FILE", "STORE_LOG_LEVEL", "DEFAULT_PAGE_LIMIT", "MAX_PAGE_LIMIT", "PORT"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.project_name == "Record Store API"
    assert s.debug is False
    assert s.log_level == "INFO"
    assert s.log_file == ""
    assert s.store_log_level == ""
    assert s.default_page_limit == 50
    assert s.max_page_limit == 1000
    assert s.port == 8000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROJECT_NAME", "Records")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("DEFAULT_PAGE_LIMIT", "5")
    monkeypatch.setenv("PORT", "9001")
    s = Settings()
    assert s.project_name == "Records"
    assert s.debug is True
    assert s.default_page_limit == 5
    assert s.port == 9001
