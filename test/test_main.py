from main import server_options


def test_server_options_defaults(monkeypatch) -> None:
    for name in ("HOST", "PORT", "RELOAD", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert server_options() == {
        "host": "127.0.0.1",
        "port": 5000,
        "reload": True,
        "log_level": "info",
    }


def test_server_options_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("RELOAD", "off")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    assert server_options() == {
        "host": "0.0.0.0",
        "port": 8080,
        "reload": False,
        "log_level": "debug",
    }
