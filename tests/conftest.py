"""
Pytest configuration and shared fixtures for fileshim tests.

Test Organization:
- tests/unit/     - Isolated tests against tmp_path, no shared temp dirs
"""

import pytest
from loguru import logger


@pytest.fixture
def loguru_messages():
    """Capture loguru records emitted during a test as plain messages."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def loguru_records():
    """Capture full loguru records (level, message, extra) emitted during a test."""
    records: list[dict] = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def sample_files(tmp_path):
    """Directory holding a.txt and b.txt with known contents."""
    (tmp_path / "a.txt").write_bytes(b"alpha")
    (tmp_path / "b.txt").write_bytes(b"bravo-bravo")
    return tmp_path
