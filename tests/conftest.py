"""Shared test fixtures for sibylline-unescape."""

import pytest

from sibylline_unescape.document import Document
from sibylline_unescape.extractor import StringExtractor
from sibylline_unescape.preview import PreviewStore


@pytest.fixture
def extractor():
    """Create a StringExtractor with the default quote style table."""
    return StringExtractor()


@pytest.fixture
def make_document():
    """Factory for in-memory documents."""
    return Document


@pytest.fixture
def preview_store():
    """Create an empty PreviewStore, cleared after the test."""
    store = PreviewStore()
    yield store
    store.clear()


@pytest.fixture
def isolated_config_dirs(tmp_path, monkeypatch):
    """Point the user and project config locations at an empty tmp directory."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    return home, project
