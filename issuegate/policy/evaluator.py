from __future__ import annotations

from typing import Optional, Sequence

from issuegate.config import DEFAULT_PR_ADDITIONS_THRESHOLD
from issuegate.integrations.jira.types import TicketDetails

HOTFIX_LABEL = "HOTFIX-PROD"
RELEASE_BRANCH_PREFIX = "release/v"


def is_status_allowed(
    validate_enabled: bool,
    allowed_statuses: Sequence[str],
    ticket: TicketDetails,
) -> bool:
    """
    Status validation is opt-in. When enabled the ticket status must equal
    one of the allowed statuses exactly (case-sensitive).
    """
    if not validate_enabled:
        return True
    if not ticket.status:
        return False
    return ticket.status in allowed_statuses


def hotfix_label(base_branch: str) -> str:
    if (base_branch or "").startswith(RELEASE_BRANCH_PREFIX):
        return HOTFIX_LABEL
    return ""


def is_humongous(additions: int, threshold: Optional[int] = None) -> bool:
    limit = DEFAULT_PR_ADDITIONS_THRESHOLD if threshold is None else int(threshold)
    return int(additions or 0) > limit
