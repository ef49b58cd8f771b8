"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures.generate import CORPUS_DIR, generate_all


@pytest.fixture(scope="session")
def corpus() -> dict[str, Path]:
    """Ensure test PDFs exist and return them by name."""
    CORPUS_DIR.mkdir(parents=True, exist_ok=True)
    return generate_all()


@pytest.fixture(scope="session")
def plain_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["plain"]


@pytest.fixture(scope="session")
def blank_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["blank"]


@pytest.fixture(scope="session")
def color_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["color"]


@pytest.fixture(scope="session")
def gray_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["gray"]


@pytest.fixture(scope="session")
def cmyk_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["cmyk"]


@pytest.fixture(scope="session")
def background_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["background"]


@pytest.fixture(scope="session")
def large_image_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["large_image"]


@pytest.fixture(scope="session")
def exact_image_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["exact_image"]


@pytest.fixture(scope="session")
def form_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["form"]


@pytest.fixture(scope="session")
def encrypted_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["encrypted"]


@pytest.fixture(scope="session")
def malformed_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["malformed"]


@pytest.fixture(scope="session")
def no_pages_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["no_pages"]


@pytest.fixture(scope="session")
def second_page_color_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["second_page_color"]


@pytest.fixture(scope="session")
def text_pdf(corpus: dict[str, Path]) -> Path:
    return corpus["text"]


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Write a sample config YAML and return its path."""
    content = """\
thresholds:
  color_delta_threshold: 60
  background_area_percent_threshold: 90
  large_image_pixel_threshold: 4.0
output:
  report_format: json
"""
    path = tmp_path / "printcheck.yaml"
    path.write_text(content, encoding="utf-8")
    return path
