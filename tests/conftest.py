from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.documents import DocumentBuilder


@pytest.fixture
def document_builder(tmp_path: Path) -> DocumentBuilder:
    """Provide a reusable document builder rooted at the pytest tmp_path."""
    return DocumentBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_mdtoc_logger():
    yield
    logger = logging.getLogger("mdtoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
