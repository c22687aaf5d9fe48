from __future__ import annotations

import re
from typing import List, Optional, Sequence

# Project prefix: a letter followed by any number of letters/digits.
_ISSUE_KEY_RE = re.compile(r"(?<![A-Z0-9])[A-Z][A-Z0-9]*-\d+")

BOT_BRANCH_PATTERNS = (
    re.compile(r"^dependabot"),
    re.compile(r"^all-contributors"),
)
DEFAULT_BRANCH_PATTERNS = (
    re.compile(r"^master$"),
    re.compile(r"^main$"),
    re.compile(r"^production$"),
    re.compile(r"^gh-pages$"),
)


def extract_issue_keys(branch_name: str) -> List[str]:
    """
    Return every issue key found in the branch name, left to right.
    Matching is case-insensitive; keys come back upper-cased.
    """
    if not branch_name:
        return []
    return _ISSUE_KEY_RE.findall(branch_name.upper())


def authoritative_issue_key(keys: Sequence[str]) -> Optional[str]:
    """The key closest to the end of the branch name wins."""
    return keys[-1] if keys else None


def should_skip_lint(branch_name: str, ignore_pattern: str) -> bool:
    if not ignore_pattern:
        return False
    return re.search(ignore_pattern, branch_name or "") is not None


def is_default_branch(branch_name: str) -> bool:
    """Bot-owned and long-lived default branches never carry a ticket key."""
    name = branch_name or ""
    return any(p.search(name) for p in BOT_BRANCH_PATTERNS + DEFAULT_BRANCH_PATTERNS)
