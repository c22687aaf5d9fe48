import logging
from typing import Any, List, Optional, Sequence

from github import Auth, Github, GithubException

logger = logging.getLogger(__name__)


class GitHubClientError(RuntimeError):
    """Raised when a GitHub API call fails."""


class GitHubClient:
    """
    Thin PyGithub wrapper exposing the pull request annotation calls
    the gate needs.
    """

    def __init__(self, token: str, *, client: Optional[Github] = None):
        self.client = client if client is not None else Github(auth=Auth.Token(token))
        self._repos = {}

    def _repo(self, owner: str, repo: str) -> Any:
        full_name = f"{owner}/{repo}"
        if full_name not in self._repos:
            self._repos[full_name] = self.client.get_repo(full_name)
        return self._repos[full_name]

    def list_comments(self, owner: str, repo: str, issue_number: int) -> List[str]:
        """Return the bodies of every comment on the issue, oldest first."""
        try:
            issue = self._repo(owner, repo).get_issue(int(issue_number))
            return [comment.body or "" for comment in issue.get_comments()]
        except GithubException as exc:
            raise GitHubClientError(f"Failed to list comments on {owner}/{repo}#{issue_number}: {exc}") from exc

    def add_labels(self, owner: str, repo: str, issue_number: int, labels: Sequence[str]) -> None:
        if not labels:
            logger.info("No labels to add to %s/%s#%s", owner, repo, issue_number)
            return
        try:
            issue = self._repo(owner, repo).get_issue(int(issue_number))
            issue.add_to_labels(*labels)
        except GithubException as exc:
            raise GitHubClientError(f"Failed to add labels to {owner}/{repo}#{issue_number}: {exc}") from exc

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        try:
            issue = self._repo(owner, repo).get_issue(int(issue_number))
            issue.create_comment(body)
        except GithubException as exc:
            raise GitHubClientError(f"Failed to comment on {owner}/{repo}#{issue_number}: {exc}") from exc
        logger.info("Posted comment to PR #%s", issue_number)

    def update_pull_request(self, owner: str, repo: str, number: int, *, body: str) -> None:
        try:
            pull = self._repo(owner, repo).get_pull(int(number))
            pull.edit(body=body)
        except GithubException as exc:
            raise GitHubClientError(f"Failed to update {owner}/{repo}#{number}: {exc}") from exc
