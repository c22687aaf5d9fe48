from __future__ import annotations

from typing import Iterable, Tuple

from issuegate.integrations.jira.types import TicketDetails
from issuegate.policy.evaluator import hotfix_label


def normalize_labels(candidates: Iterable[str]) -> Tuple[str, ...]:
    """Drop blank entries and duplicates, keeping first-seen order."""
    labels = []
    seen = set()
    for candidate in candidates:
        label = (candidate or "").strip()
        if not label or label in seen:
            continue
        seen.add(label)
        labels.append(label)
    return tuple(labels)


def build_label_set(ticket: TicketDetails, base_branch: str) -> Tuple[str, ...]:
    return normalize_labels([ticket.project_name, hotfix_label(base_branch), ticket.type_name])
