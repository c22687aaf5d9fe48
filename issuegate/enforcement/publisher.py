import logging
from typing import Any, List, Optional, Sequence

from issuegate.context.types import PullRequestContext

logger = logging.getLogger(__name__)


class PullRequestPublisher:
    """
    Applies annotations to one pull request.

    Comments are deduplicated against a single snapshot of the existing
    comment list, taken by load() and never re-fetched during the run.
    """

    def __init__(self, github: Any, context: PullRequestContext):
        self.github = github
        self.context = context
        self._existing: Optional[List[str]] = None

    def load(self) -> None:
        self._existing = list(
            self.github.list_comments(self.context.owner, self.context.repo, self.context.issue_number)
        )
        logger.info("Loaded %d existing comments on PR #%s", len(self._existing), self.context.issue_number)

    @property
    def existing_comments(self) -> List[str]:
        if self._existing is None:
            self.load()
        return self._existing

    def already_posted(self, body: str) -> bool:
        wanted = (body or "").lower()
        return any((existing or "").lower() == wanted for existing in self.existing_comments)

    def publish_comment(self, body: str) -> bool:
        """Post the comment unless an identical one exists. Returns True when posted."""
        if self.already_posted(body):
            logger.info("Comment already exists on PR #%s, skipping.", self.context.issue_number)
            return False
        self.github.create_comment(self.context.owner, self.context.repo, self.context.issue_number, body)
        self.existing_comments.append(body)
        return True

    def publish_labels(self, labels: Sequence[str]) -> None:
        logger.info("Adding labels -> %s", list(labels))
        self.github.add_labels(self.context.owner, self.context.repo, self.context.issue_number, list(labels))

    def publish_description(self, body: str) -> None:
        logger.info("Updating description of PR #%s", self.context.issue_number)
        self.github.update_pull_request(self.context.owner, self.context.repo, self.context.issue_number, body=body)
