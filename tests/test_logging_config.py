import logging

import pytest
from fastapi.testclient import TestClient

from records_api.app.core.config import settings
from records_api.app.core.logging_config import APP_LOGGER, setup_logging
from records_api.app.main import create_app


@pytest.fixture
def app_logger():
    logger = logging.getLogger(APP_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


@pytest.mark.parametrize("name, level", [("DEBUG", logging.DEBUG), ("warning", logging.WARNING)])
def test_create_app_applies_log_level(monkeypatch, stores, app_logger, name, level):
    # A host that configured logging first.
    root_handler = logging.NullHandler()
    logging.getLogger().addHandler(root_handler)
    monkeypatch.setattr(settings, "log_level", name)
    try:
        create_app(stores)
    finally:
        logging.getLogger().removeHandler(root_handler)
    assert app_logger.level == level
    assert logging.getLogger("records_api.app.services.resource_controller").getEffectiveLevel() == level


def test_unknown_level_falls_back_to_info(app_logger):
    setup_logging("chatty")
    assert app_logger.level == logging.INFO


def test_log_file_receives_service_lines(monkeypatch, tmp_path, stores, app_logger, write_headers):
    path = tmp_path / "records.log"
    monkeypatch.setattr(settings, "log_level", "INFO")
    monkeypatch.setattr(settings, "log_file", str(path))
    client = TestClient(create_app(stores))
    # A second app in the same process reuses the handler.
    create_app(stores)
    client.post("/api/tree/post", params={"name": "Oak", "category": "Deciduous"}, headers=write_headers)

    file_handlers = [h for h in app_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert "Created Tree 1" in path.read_text(encoding="utf-8")
