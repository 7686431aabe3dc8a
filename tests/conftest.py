import logging

import pytest

from themebuilder.config.settings import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _isolated_builder(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    yield
    logger = logging.getLogger("themebuilder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
