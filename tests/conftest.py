import os

import pytest

from issuegate.config import GateConfig
from issuegate.context.types import PullRequestContext
from issuegate.observability.logs import clear_run_context


@pytest.fixture(autouse=True)
def _clear_action_env(monkeypatch):
    """Keep tests deterministic regardless of the developer's shell or runner env."""
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name, raising=False)
    for name in ("JIRA_API_TOKEN", "JIRA_BASE_URL", "JIRA_EMAIL", "GITHUB_TOKEN", "GITHUB_OUTPUT", "GITHUB_EVENT_PATH",
                 "ISSUEGATE_JIRA_TIMEOUT_SECONDS", "ISSUEGATE_LOG_FORMAT", "ISSUEGATE_LOG_LEVEL", "GITHUB_ACTIONS"):
        monkeypatch.delenv(name, raising=False)
    clear_run_context()
    yield
    clear_run_context()


@pytest.fixture
def gate_config():
    def _build(**overrides):
        values = {
            "jira_base_url": "https://example.atlassian.net",
            "jira_token": "jira-token",
            "github_token": "gh-token",
        }
        values.update(overrides)
        return GateConfig(**values)

    return _build


@pytest.fixture
def pr_context():
    def _build(**overrides):
        values = {
            "owner": "acme",
            "repo": "service-api",
            "issue_number": 17,
            "base_branch": "develop",
            "head_branch": "feature/ABC-42-foo",
            "title": "Add login page",
            "body": "Implements the login page.",
            "additions": 120,
        }
        values.update(overrides)
        return PullRequestContext(**values)

    return _build
