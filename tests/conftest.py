"""Shared fixtures for catalog tests."""

import pytest

from uistrings.catalog import reset_catalog


@pytest.fixture
def bundle_dir(tmp_path):
    """A small ui_strings bundle with neutral, fr and fr-CA tables."""
    (tmp_path / "ui_strings.yaml").write_text(
        'OutputType: "Output Type"\n'
        'Exe: "Console Application"\n'
        'BraceMatchStatus: "Matches: {0}"\n',
        encoding="utf-8",
    )
    (tmp_path / "ui_strings.fr.yaml").write_text(
        'OutputType: "Type de sortie"\n',
        encoding="utf-8",
    )
    (tmp_path / "ui_strings.fr-CA.yaml").write_text(
        'Exe: "Application console"\n',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_default_catalog():
    """Keep the process default catalog from leaking between tests."""
    reset_catalog()
    yield
    reset_catalog()
