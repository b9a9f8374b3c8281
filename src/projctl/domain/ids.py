"""Project ID pattern, generation, and validation.

IDs are 9 lowercase base-36 characters drawn at random. Uniqueness is
practical, not guaranteed: collisions are not checked for.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import random
import re
import string

ID_LENGTH = 9
ID_ALPHABET = string.digits + string.ascii_lowercase
ID_PATTERN: re.Pattern[str] = re.compile(rf"^[0-9a-z]{{{ID_LENGTH}}}$")


def generate_project_id() -> str:
    """Return a fresh random project ID."""
    return "".join(random.choices(ID_ALPHABET, k=ID_LENGTH))


def validate_project_id(project_id: str) -> bool:
    """Check whether *project_id* matches the project ID pattern."""
    return ID_PATTERN.match(project_id) is not None
