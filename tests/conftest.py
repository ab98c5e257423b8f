"""Shared fixtures: a throwaway project root with template and viewer."""

from __future__ import annotations

from pathlib import Path

import pytest

TEMPLATE = "openapi: 3.0\nsecurity:\n  key: ${API_KEY}\n"
VIEWER = "<!doctype html>\n<html><body><div id=\"swagger-ui\"></div></body></html>\n"


def write_template(root: Path, api: str, text: str = TEMPLATE) -> Path:
    """Write openapi/<api>/openapi.template.yaml under root."""
    path = root / "openapi" / api / "openapi.template.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_viewer(root: Path, html: str = VIEWER) -> Path:
    """Write site/swagger.html under root."""
    path = root / "site" / "swagger.html"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path


@pytest.fixture
def viewer_html() -> str:
    """Contents of the site/swagger.html written into the project."""
    return VIEWER


@pytest.fixture
def template_writer(tmp_path: Path):
    """Return a callable that writes a template for an API under tmp_path."""
    def _write(api: str, text: str = TEMPLATE) -> Path:
        return write_template(tmp_path, api, text)
    return _write


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with templates for ojp1.0 and ojp3.0 plus the viewer."""
    write_template(tmp_path, "ojp1.0")
    write_template(tmp_path, "ojp3.0")
    write_viewer(tmp_path)
    return tmp_path
