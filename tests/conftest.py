from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by the CLI so they do not leak across tests."""
    yield
    logger = logging.getLogger("wallabag_to_karakeep")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("WB2KK_EXTRA_TAGS", "WB2KK_LOG_LEVEL", "WB2KK_OUTPUT_DIR", "WB2KK_SERVER_NAME", "WB2KK_SERVER_PORT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def wallabag_entry():
    return {
        "is_archived": 0,
        "is_starred": 0,
        "tags": [],
        "is_public": False,
        "id": 20833359,
        "title": "Linux x86 Program Start Up",
        "url": "https://web.archive.org/web/20191210114310/http://dbp-consulting.com/tutorials/debugging/linuxProgramStartup.html",
        "given_url": "https://web.archive.org/web/20191210114310/http://dbp-consulting.com/tutorials/debugging/linuxProgramStartup.html",
        "content": "Linux x86 Program Start Up\n",
        "created_at": "2025-05-15T18:45:18+02:00",
        "updated_at": "2025-05-15T18:45:18+02:00",
        "published_by": [""],
        "annotations": [],
        "reading_time": 28,
        "domain_name": "web.archive.org",
        "preview_picture": "https://web.archive.org/web/20191210114310im_/http://dbp-consulting.com/images/logo.svg",
    }
