import json
import os
from typing import Any, Dict, Optional

from issuegate.context.types import PullRequestContext
from issuegate.errors import GateContextError


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def load_event_payload(event_path: Optional[str] = None) -> Dict[str, Any]:
    """Read the webhook payload the runner stores at GITHUB_EVENT_PATH."""
    path = event_path or os.getenv("GITHUB_EVENT_PATH", "")
    if not path:
        raise GateContextError("GITHUB_EVENT_PATH is not set; cannot read the pull request event.")
    if not os.path.exists(path):
        raise GateContextError(f"Event payload not found at {path}")
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise GateContextError("Event payload must be a JSON object.")
    return payload


def build_pull_request_context(payload: Dict[str, Any]) -> PullRequestContext:
    """
    Hydrate a PullRequestContext from a pull_request event payload.
    Missing optional fields fall back to empty values; a missing repository
    or pull request is a context error.
    """
    repository = payload.get("repository")
    if not isinstance(repository, dict):
        raise GateContextError("Missing 'repository' from github action context.")
    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, dict):
        raise GateContextError("Missing 'pull_request' from github action context. Is this a pull_request event?")

    owner = _as_str(_as_dict(payload.get("organization")).get("login"))
    if not owner:
        owner = _as_str(_as_dict(repository.get("owner")).get("login"))

    return PullRequestContext(
        owner=owner,
        repo=_as_str(repository.get("name")),
        issue_number=_as_int(pull_request.get("number")),
        base_branch=_as_str(_as_dict(pull_request.get("base")).get("ref")),
        head_branch=_as_str(_as_dict(pull_request.get("head")).get("ref")),
        title=_as_str(pull_request.get("title")),
        body=_as_str(pull_request.get("body")),
        additions=_as_int(pull_request.get("additions")),
    )
