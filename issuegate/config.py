from __future__ import annotations

import os
import re
from typing import Any, Dict, List, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from issuegate.errors import GateConfigError

# Load params from .env file
load_dotenv()

DEFAULT_PR_ADDITIONS_THRESHOLD = 800
DEFAULT_JIRA_TIMEOUT_SECONDS = 5.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class GateConfig(BaseModel):
    """Validated action inputs for a single gate run."""

    jira_base_url: str
    jira_token: str
    jira_user: str = ""
    github_token: str
    branch_ignore_pattern: str = ""
    skip_comments: bool = False
    pr_threshold: int = DEFAULT_PR_ADDITIONS_THRESHOLD
    validate_issue_status: bool = False
    allowed_issue_statuses: List[str] = Field(default_factory=list)
    skip_default_branches: bool = True
    jira_timeout_seconds: float = DEFAULT_JIRA_TIMEOUT_SECONDS


def _input_env_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, env: Optional[Mapping[str, str]] = None, *, fallback: Optional[str] = None) -> str:
    """
    Read an action input the way the Actions toolkit exposes it (INPUT_<NAME>).
    Falls back to a plain environment variable when the input is unset.
    """
    source = os.environ if env is None else env
    value = str(source.get(_input_env_name(name), "") or "").strip()
    if not value and fallback:
        value = str(source.get(fallback, "") or "").strip()
    return value


def _to_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return default


def parse_threshold(raw: Any) -> int:
    """PR size threshold; absent, unparseable or zero values use the default."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return DEFAULT_PR_ADDITIONS_THRESHOLD
    return value or DEFAULT_PR_ADDITIONS_THRESHOLD


def parse_allowed_statuses(raw: Any) -> List[str]:
    if isinstance(raw, (list, tuple)):
        items = [str(item) for item in raw]
    else:
        items = str(raw or "").split(",")
    return [item.strip() for item in items if item.strip()]


def _parse_timeout(raw: Any) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return DEFAULT_JIRA_TIMEOUT_SECONDS


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Load optional YAML defaults keyed by input name."""
    if not path or not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise GateConfigError(f"Config file {path} must contain a mapping of inputs.")
    return data


def load_config(
    env: Optional[Mapping[str, str]] = None,
    *,
    config_path: Optional[str] = None,
) -> GateConfig:
    """
    Resolve action inputs into a GateConfig.

    Inputs win over values from the optional YAML file.
    Raises GateConfigError for missing required inputs or an invalid
    branch ignore pattern.
    """
    file_values = load_config_file(config_path)

    def value(name: str, fallback: Optional[str] = None) -> Any:
        raw = get_input(name, env, fallback=fallback)
        if raw:
            return raw
        return file_values.get(name)

    missing = []
    jira_token = value("jira-token", "JIRA_API_TOKEN")
    jira_base_url = value("jira-base-url", "JIRA_BASE_URL")
    github_token = value("github-token", "GITHUB_TOKEN")
    for name, found in (
        ("jira-token", jira_token),
        ("jira-base-url", jira_base_url),
        ("github-token", github_token),
    ):
        if not found:
            missing.append(name)
    if missing:
        raise GateConfigError(f"Input required and not supplied: {', '.join(missing)}")

    ignore_pattern = str(value("skip-branches") or "")
    if ignore_pattern:
        try:
            re.compile(ignore_pattern)
        except re.error as exc:
            raise GateConfigError(f"Invalid skip-branches pattern {ignore_pattern!r}: {exc}") from exc

    return GateConfig(
        jira_base_url=str(jira_base_url).strip().rstrip("/"),
        jira_token=str(jira_token),
        jira_user=str(value("jira-user", "JIRA_EMAIL") or ""),
        github_token=str(github_token),
        branch_ignore_pattern=ignore_pattern,
        skip_comments=_to_bool(value("skip-comments"), default=False),
        pr_threshold=parse_threshold(value("pr-threshold")),
        validate_issue_status=_to_bool(value("validate_issue_status"), default=False),
        allowed_issue_statuses=parse_allowed_statuses(value("allowed_issue_statuses")),
        skip_default_branches=_to_bool(value("skip-default-branches"), default=True),
        jira_timeout_seconds=_parse_timeout(
            value("jira-timeout-seconds", "ISSUEGATE_JIRA_TIMEOUT_SECONDS") or DEFAULT_JIRA_TIMEOUT_SECONDS
        ),
    )
