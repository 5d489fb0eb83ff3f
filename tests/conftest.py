"""Shared fixtures for i18nx tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def snapshot_text() -> str:
    """Snapshot with German and French translations."""
    return (FIXTURES_DIR / "demo.yaml").read_text(encoding="utf-8")


@pytest.fixture
def ru_table_text() -> str:
    """Russian locale table."""
    return (FIXTURES_DIR / "demo.ru.yaml").read_text(encoding="utf-8")


@pytest.fixture
def cn_table_text() -> str:
    """Chinese locale table."""
    return (FIXTURES_DIR / "demo.cn.yaml").read_text(encoding="utf-8")
