"""Pytest configuration for release packaging tests."""

from __future__ import annotations

import sys
from typing import Iterator
from pathlib import Path

import pytest
from loguru import logger


ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clean_release_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RELEASE_PROJECT_NAME", raising=False)
    monkeypatch.delenv("RELEASE_OUTPUT_DIR", raising=False)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
