"""Seed loader — reads the bundled submissions used to bootstrap storage."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter

from blog_moderation.models.submission import Submission

SEED_PATH = Path(__file__).resolve().parent / "data" / "seed_submissions.json"

logger = logging.getLogger(__name__)

_SUBMISSION_LIST = TypeAdapter(list[Submission])


@lru_cache(maxsize=1)
def _read_seed_text() -> str:
    text = SEED_PATH.read_text(encoding="utf-8")
    logger.debug("Seed loaded — path=%s", SEED_PATH)
    return text


def load_seed_submissions() -> list[Submission]:
    """Return fresh model objects for the seed dataset.

    Raises ``FileNotFoundError`` if the packaged seed file is missing.
    """
    return _SUBMISSION_LIST.validate_python(json.loads(_read_seed_text()))
