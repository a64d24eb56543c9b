import meg_dashboard.main as main
from meg_dashboard.config import Settings


def test_import_nao_cria_app_nem_engine():
    assert not hasattr(main, "app")


def test_run_monta_app_pela_fabrica(monkeypatch):
    chamadas = {}

    def fake_run(app, host, port):
        chamadas.update(app=app, host=host, port=port)

    monkeypatch.setattr(main.uvicorn, "run", fake_run)
    monkeypatch.setattr(main.Settings, "from_env", classmethod(
        lambda cls: Settings(url_override="sqlite://", host="127.0.0.1", port=3100)))

    main.run()

    assert (chamadas["host"], chamadas["port"]) == ("127.0.0.1", 3100)
    app = chamadas["app"]
    assert app.state.settings.port == 3100
    assert app.state.engine.url.get_backend_name() == "sqlite"
    assert app.state.engine.pool is not None
