"""Render one API's spec and write it with the viewer page.

Layout, relative to the project root:

  openapi/<api>/openapi.template.yaml  -> dist/<api>/openapi.yaml
  site/swagger.html                    -> dist/<api>/index.html
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ArtifactWriteError, MissingAssetError, MissingTemplateError
from .substitute import substitute

TEMPLATE_DIR = "openapi"
TEMPLATE_NAME = "openapi.template.yaml"
VIEWER_PATH = Path("site") / "swagger.html"
OUTPUT_DIR = "dist"
OUTPUT_SPEC = "openapi.yaml"
OUTPUT_VIEWER = "index.html"


@dataclass(frozen=True)
class BuildPaths:
    template: Path
    viewer: Path
    out_dir: Path
    out_spec: Path
    out_viewer: Path


def build_paths(api: str, root: Path) -> BuildPaths:
    """Derive every input and output path for an API."""
    out_dir = root / OUTPUT_DIR / api
    return BuildPaths(
        template=root / TEMPLATE_DIR / api / TEMPLATE_NAME,
        viewer=root / VIEWER_PATH,
        out_dir=out_dir,
        out_spec=out_dir / OUTPUT_SPEC,
        out_viewer=out_dir / OUTPUT_VIEWER,
    )


def build(api: str, config: Mapping[str, str | None], root: Path) -> BuildPaths:
    """Substitute the template for api and write both artifacts.

    Inputs are checked and the spec is rendered before anything is
    written, so a failed build leaves no output.
    """
    paths = build_paths(api, root)

    if not paths.template.is_file():
        raise MissingTemplateError(f"Template not found: {paths.template}")
    if not paths.viewer.is_file():
        raise MissingAssetError(f"Swagger HTML not found: {paths.viewer}")

    # newline="" and surrogateescape keep the template's bytes intact
    with open(paths.template, encoding="utf-8", errors="surrogateescape", newline="") as f:
        rendered = substitute(f.read(), api, config)

    paths.out_dir.mkdir(parents=True, exist_ok=True)
    _commit(rendered, paths)
    return paths


def _commit(rendered: str, paths: BuildPaths) -> None:
    """Stage both artifacts under temp names, then move them into place."""
    spec_tmp = paths.out_spec.with_name(paths.out_spec.name + ".tmp")
    viewer_tmp = paths.out_viewer.with_name(paths.out_viewer.name + ".tmp")
    try:
        with open(spec_tmp, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(rendered)
        shutil.copyfile(paths.viewer, viewer_tmp)
        os.replace(viewer_tmp, paths.out_viewer)
        os.replace(spec_tmp, paths.out_spec)
    except OSError as e:
        spec_tmp.unlink(missing_ok=True)
        viewer_tmp.unlink(missing_ok=True)
        raise ArtifactWriteError(f"Could not write {paths.out_dir}: {e}") from e
