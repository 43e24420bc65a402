"""Derive a .bru file's role from its path and raw text."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from brulint.core.models import Classification

FOLDER_DOC_NAME = "folder.bru"
ENVIRONMENT_DIR = "environments"

HTTP_VERBS = ("get", "post", "put", "patch", "delete")
MUTATING_VERBS = ("post", "put", "patch", "delete")

VERB_BLOCK_RE = re.compile(r"(^|\n)\s*(" + "|".join(HTTP_VERBS) + r")\s*{")
CHECK_SCENARIO_RE = re.compile(r"^\d+\s-\sCheck", re.IGNORECASE)


def is_check_scenario(name: str) -> bool:
    """``"01 - Check Students.bru"`` or ``"Check Students.bru"``."""
    return bool(CHECK_SCENARIO_RE.match(name)) or name.startswith("Check ")


def classify(path: str, text: str) -> Classification:
    """Classify a file. ``path`` is relative to the project root."""
    rel = PurePosixPath(path.replace("\\", "/"))
    return Classification(
        is_folder_doc=rel.name == FOLDER_DOC_NAME,
        is_environment=ENVIRONMENT_DIR in rel.parts[:-1],
        has_http_verb_block=bool(VERB_BLOCK_RE.search(text)),
        is_check_scenario=is_check_scenario(rel.name),
    )
