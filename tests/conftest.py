"""Root test configuration: isolate tests from FMSTRIP_* environment variables"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any FMSTRIP_<FIELD> variables inherited from the calling shell."""
    for name in list(os.environ):
        if name.startswith("FMSTRIP_"):
            monkeypatch.delenv(name)
