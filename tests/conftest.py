"""Shared fixtures: sample texts and a clean config environment"""

import pytest

from linediff.config import Settings


OLD_TEXT = """\
def greet(name):
    print("hello", name)
    return name"""

NEW_TEXT = """\
def greet(name, punct="!"):
    print("hello", name)
    return name + punct"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip LINEDIFF_* env vars so host settings never leak into tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"LINEDIFF_{name.upper()}", raising=False)


@pytest.fixture(name="sample_files")
def sample_files_fixture(tmp_path):
    old = tmp_path / "old.py"
    new = tmp_path / "new.py"
    old.write_text(OLD_TEXT)
    new.write_text(NEW_TEXT)
    return old, new
