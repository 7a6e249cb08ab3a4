from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def registry_path() -> Path:
    return FIXTURES / "component-registry.json"


@pytest.fixture
def tailwind_css_path() -> Path:
    return FIXTURES / "tailwind-theme.css"


@pytest.fixture
def kumo_css_path() -> Path:
    return FIXTURES / "theme-kumo.css"


@pytest.fixture
def tailwind_css(tailwind_css_path: Path) -> str:
    return tailwind_css_path.read_text(encoding="utf-8")


@pytest.fixture
def kumo_css(kumo_css_path: Path) -> str:
    return kumo_css_path.read_text(encoding="utf-8")
