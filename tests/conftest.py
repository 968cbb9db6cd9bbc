"""Pytest configuration and fixtures for Hunk Label tests."""

import itertools
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from hunklabel.config import SessionConfig
from hunklabel.session import LabelingSession

SAMPLE_DIFF = """\
diff --git a/a.py b/a.py
index 1111111..2222222 100644
--- a/a.py
+++ b/a.py
@@ -1,3 +1,3 @@
 one
-two
+TWO
 three
@@ -10,2 +10,3 @@
 ten
+ten-and-a-half
 eleven
diff --git a/b.py b/b.py
index 3333333..4444444 100644
--- a/b.py
+++ b/b.py
@@ -5,2 +5,1 @@
 five
-six
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="hunklabel_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_diff() -> str:
    """Unified diff with two hunks in a.py and one hunk in b.py."""
    return SAMPLE_DIFF


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic label id generator."""
    counter = itertools.count(1)
    return lambda: f"label-{next(counter)}"


@pytest.fixture
def session(id_factory) -> LabelingSession:
    """Empty labeling session with deterministic ids."""
    return LabelingSession(SessionConfig(), id_factory=id_factory)


@pytest.fixture
def loaded_session(session: LabelingSession, sample_diff: str) -> LabelingSession:
    """Session with the sample diff loaded."""
    session.load_text(sample_diff)
    return session
