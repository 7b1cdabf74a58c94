"""
Validators for cached views of a team's task list.

The ETag is a fingerprint of the rows actually returned, so any create,
update or delete (in this process or another one) changes it.
"""

import hashlib
from typing import Iterable, Optional

from app.models.task import Task
from app.utils.time import ensure_utc


def task_list_etag(team_id: int, tasks: Iterable[Task]) -> str:
    """Weak ETag over (id, updated_at) of every task in the list."""
    digest = hashlib.sha256(f"team:{team_id}".encode("utf-8"))
    for task in tasks:
        digest.update(f"|{task.id}:{ensure_utc(task.updated_at).isoformat()}".encode("utf-8"))
    return f'W/"tasks-{team_id}-{digest.hexdigest()[:32]}"'


def etag_matches(if_none_match: Optional[str], etag: str) -> bool:
    """True when an If-None-Match header lists the given ETag (or is `*`)."""
    if not if_none_match:
        return False
    candidates = [value.strip() for value in if_none_match.split(",")]
    return "*" in candidates or etag in candidates
