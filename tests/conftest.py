"""Pytest configuration shared by all test suites"""

import logging
import sys
from pathlib import Path

import pytest

# Add src/ to path so tests run without an editable install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from bm25_corpus import Corpus


@pytest.fixture
def pets_corpus():
    """Three short sentences: two mention 'cat', one mentions 'dogs'"""
    return Corpus([
        "the cat sat on the mat",
        "dogs are great pets",
        "the cat and the dog played",
    ])


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by setup_logging()"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
