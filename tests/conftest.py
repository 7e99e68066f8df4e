"""
Pytest fixtures and configuration for the test suite.

Every test works on real files under pytest's tmp_path; nothing is mocked
at the persistence layer.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import folio package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from folio.persistence.document_store import DocumentStore  # noqa: E402
from folio.persistence.submission_log import SubmissionLog  # noqa: E402


def sample_site() -> dict[str, Any]:
    """A small but complete site document."""
    return {
        "meta": {"title": "Ada Lovelace", "description": "Portfolio", "ogImage": ""},
        "nav": {"logoText": "AL", "links": [{"id": "about", "label": "About"}, {"id": "projects", "label": "Work"}]},
        "hero": {
            "enabled": True,
            "greeting": "Hi, I'm",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "titles": ["Engineer"],
            "ctas": [
                {"style": "primary", "icon": "fa-paper-plane", "label": "Contact", "href": "#contact"},
                {"style": "outline", "icon": "", "label": "Resume", "href": "/cv.pdf"},
            ],
        },
        "about": {"enabled": True, "number": "01", "title": "About", "paragraphsHtml": ["Hello."]},
        "projects": {
            "enabled": False,
            "title": "Projects",
            "cards": [{"frontTitle": "Engine"}, {"frontTitle": "Loom"}],
        },
        "blog": {"enabled": True, "title": "Blog", "posts": [{"title": "Notes"}]},
    }


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty data directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def site_path(data_dir: Path) -> Path:
    """Data directory with a sample site.json written."""
    path = data_dir / "site.json"
    path.write_text(json.dumps(sample_site(), indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def site_store(site_path: Path) -> DocumentStore:
    """Store over the sample site document."""
    return DocumentStore(site_path)


@pytest.fixture
def submission_log(data_dir: Path) -> SubmissionLog:
    """Empty submission log."""
    return SubmissionLog(data_dir / "submissions.json")


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep FOLIO_* variables and ./config/config.yaml of the host out of tests."""
    for key in list(os.environ):
        if key.startswith("FOLIO_") or key == "CONFIG_PATH":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def site_document() -> dict[str, Any]:
    """Fresh copy of the sample site document."""
    return sample_site()
