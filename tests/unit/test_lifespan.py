import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from revert_codes import lifespan


def test_lifespan_sets_state_and_telemetry(tmp_path, monkeypatch):
    monkeypatch.setenv("REVERT_CODES_LOG_DIR", str(tmp_path / "logs"))
    seen = {}

    def _startup(app: FastAPI) -> None:
        seen["duplicates"] = app.state.table_duplicates
        seen["label"] = app.state.app_label

    app = FastAPI(lifespan=lifespan.build_application_lifespan("unit", startup_hook=_startup))
    with TestClient(app):
        assert isinstance(app.state.telemetry_handler, logging.FileHandler)

    assert seen["label"] == "unit"
    assert seen["duplicates"] == {"prefixes": {}, "codes": {}}
    assert not hasattr(app.state, "settings")
    assert (tmp_path / "logs" / "unit.log").exists()


def test_check_tables_warns_on_duplicates(monkeypatch, caplog):
    monkeypatch.setattr(lifespan, "ERROR_PREFIXES", {"#A": "same", "#B": "same"})
    with caplog.at_level(logging.WARNING, logger="revert_codes"):
        duplicates = lifespan._check_tables(logging.getLogger("revert_codes.test"))
    assert duplicates["prefixes"] == {"same": ["#A", "#B"]}
    assert "compress() will return #A" in caplog.text


def test_lifespan_leaves_package_logger_level_alone(tmp_path, monkeypatch):
    monkeypatch.setenv("REVERT_CODES_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("REVERT_CODES_LOG_LEVEL", "info")
    package_logger = logging.getLogger("revert_codes")
    before = package_logger.level

    app = FastAPI(lifespan=lifespan.build_application_lifespan("levels"))
    with TestClient(app):
        assert app.state.telemetry_handler.level == logging.INFO
        assert package_logger.level == before

    assert package_logger.level == before
    assert not hasattr(app.state, "telemetry_handler")
