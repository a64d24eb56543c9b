from meg_dashboard.config import Settings


def test_from_env(monkeypatch):
    for k in ("DATABASE_URL", "PGDATABASE", "PGPASSWORD", "LOG_FILE"):
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PGHOST", "db.interno")
    monkeypatch.setenv("PGPORT", "6543")
    monkeypatch.setenv("PGUSER", "meg")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert (s.pghost, s.pgport, s.pguser, s.port, s.log_level) == ("db.interno", 6543, "meg", 8080, "DEBUG")
    url = s.database_url
    assert url.drivername == "postgresql+psycopg"
    assert (url.host, url.port, url.database) == ("db.interno", 6543, "meg")


def test_porta_padrao(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings.from_env().port == 3000


def test_senha_nao_e_interpolada():
    s = Settings(pguser="meg", pgpassword="p@ss:w/rd", pgdatabase="loja")
    url = s.database_url
    assert url.password == "p@ss:w/rd"
    assert url.database == "loja"


def test_database_url_sobrescreve():
    assert Settings(url_override="sqlite:///meg.db").database_url == "sqlite:///meg.db"
