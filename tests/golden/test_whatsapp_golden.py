"""Golden tests for Markdown to WhatsApp conversion using on-disk fixtures.

Each ``<name>.md`` fixture is paired with a ``<name>.txt`` file holding the
expected WhatsApp text.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from md2whatsapp import to_whatsapp

FIXTURES_ROOT = Path(__file__).parent / "fixtures"


def _case(name: str, *marks: pytest.MarkDecorator) -> pytest.ParameterSet:
    mark_list = list(marks)
    mark_list.append(pytest.mark.integration)
    return pytest.param(FIXTURES_ROOT / f"{name}.md", marks=mark_list, id=name)


GOLDEN_FIXTURES = [
    _case("basic_formatting"),
    _case("lists_and_quotes"),
    _case("tables"),
    _case("code_and_breaks"),
]


@pytest.mark.golden
@pytest.mark.parametrize("fixture_path", GOLDEN_FIXTURES)
def test_golden_fixture(fixture_path: Path) -> None:
    """Convert each fixture and compare against the stored expected text."""
    expected_path = fixture_path.with_suffix(".txt")
    markdown = fixture_path.read_text(encoding="utf-8")
    expected = expected_path.read_text(encoding="utf-8").rstrip("\n")

    assert to_whatsapp(markdown) == expected


@pytest.mark.golden
def test_every_fixture_has_expected_output() -> None:
    sources = sorted(path.stem for path in FIXTURES_ROOT.glob("*.md"))
    expected = sorted(path.stem for path in FIXTURES_ROOT.glob("*.txt"))
    assert sources == expected
