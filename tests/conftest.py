"""Shared fixtures for starter-cli tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

TEMPLATE_MANIFEST = {
    "name": "react-app-template",
    "version": "0.0.1",
    "description": "React app template",
    "author": "template-author",
    "scripts": {"start": "node server.js", "dev": "vite", "build": "vite build"},
}


@pytest.fixture
def template_manifest() -> dict:
    return dict(TEMPLATE_MANIFEST)


@pytest.fixture
def fake_download(template_manifest):
    """A download_template stand-in that writes a package.json into the target."""
    calls: list[tuple[str, Path, bool]] = []

    def _download(ref, dest, *, clone=True, client=None, github_token=None):
        calls.append((ref, dest, clone))
        dest.mkdir(parents=True)
        (dest / "package.json").write_text(json.dumps(template_manifest), encoding="utf-8")

    _download.calls = calls
    return _download
