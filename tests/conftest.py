"""Pytest configuration and shared fixtures for the md2whatsapp test suite."""

import logging
from pathlib import Path
from typing import Generator

import pytest

from md2whatsapp.ast import Document, Table, TableCell, TableRow, Text
from md2whatsapp.parsers.markdown import markdown_to_ast


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "golden: Golden tests comparing full conversions to expected files")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """Drop root logger handlers installed by CLI tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no md2whatsapp environment or home config."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    for name in (
        "MD2WHATSAPP_CONFIG",
        "MD2WHATSAPP_TABLE_FORMAT",
        "MD2WHATSAPP_TABLE_THRESHOLD",
        "MD2WHATSAPP_MAX_TABLE_ROWS",
    ):
        monkeypatch.delenv(name, raising=False)
    return work


def make_table(header: list[str] | None, rows: list[list[str]]) -> Table:
    """Build a table of plain text cells."""
    header_row = None
    if header is not None:
        header_row = TableRow(cells=[TableCell(content=[Text(content=text)]) for text in header])
    body = [TableRow(cells=[TableCell(content=[Text(content=text)]) for text in row]) for row in rows]
    return Table(header=header_row, rows=body)


@pytest.fixture
def table_factory():
    """Provide the plain text table builder."""
    return make_table


@pytest.fixture
def parse_markdown():
    """Parse Markdown into a Document with default parser options."""

    def _parse(text: str) -> Document:
        return markdown_to_ast(text)

    return _parse
