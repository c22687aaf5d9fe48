"""
Pull request gate: resolves the branch's Jira issue, annotates the pull
request and decides the verdict.
"""
import logging
from typing import Any, List

from issuegate.config import GateConfig
from issuegate.context.types import PullRequestContext
from issuegate.decision.types import GateResult, VerdictStatus, join_violations
from issuegate.enforcement.publisher import PullRequestPublisher
from issuegate.observability.logs import bind_run_context
from issuegate.policy.branches import (
    authoritative_issue_key,
    extract_issue_keys,
    is_default_branch,
    should_skip_lint,
)
from issuegate.policy.evaluator import is_humongous, is_status_allowed
from issuegate.review.comments import (
    BRANCH_UNDETERMINED_COMMENT,
    huge_pr_comment,
    invalid_status_comment,
    no_issue_key_comment,
    title_comment,
)
from issuegate.review.description import merge_description, should_update_description
from issuegate.review.labels import build_label_set

logger = logging.getLogger(__name__)

BRANCHES_UNDETERMINED = "Unable to get the head and base branch."
ISSUE_KEY_MISSING = "JIRA issue id is missing in your branch."
INVALID_ISSUE_KEY = "Invalid JIRA key. Please create a branch with a valid JIRA issue key."
INVALID_ISSUE_STATUS = "The found JIRA issue is not in acceptable statuses."


def run_gate(
    config: GateConfig,
    context: PullRequestContext,
    github: Any,
    jira: Any,
) -> GateResult:
    """
    Run the gate once for a pull request.

    Policy violations are collected and reported in the returned result.
    Collaborator failures (Jira/GitHub transport or auth errors) propagate.
    """
    bind_run_context(
        repository=f"{context.owner}/{context.repo}",
        pull_request=context.issue_number or None,
        issue_key=None,
    )
    publisher = PullRequestPublisher(github, context)

    if not context.head_branch and not context.base_branch:
        posted = 1 if publisher.publish_comment(BRANCH_UNDETERMINED_COMMENT) else 0
        return GateResult(status=VerdictStatus.FAILED, message=BRANCHES_UNDETERMINED, comments_posted=posted)

    logger.info("Base branch -> %s", context.base_branch)
    logger.info("Head branch -> %s", context.head_branch)

    if should_skip_lint(context.head_branch, config.branch_ignore_pattern):
        logger.info("Branch %s matches the ignore pattern, skipping.", context.head_branch)
        return GateResult(status=VerdictStatus.SKIPPED, message=f"Skipped branch {context.head_branch}")
    if config.skip_default_branches and is_default_branch(context.head_branch):
        logger.info("Branch %s is a bot or default branch, skipping.", context.head_branch)
        return GateResult(status=VerdictStatus.SKIPPED, message=f"Skipped branch {context.head_branch}")

    publisher.load()
    posted = 0
    violations: List[str] = []

    issue_key = authoritative_issue_key(extract_issue_keys(context.head_branch))
    if issue_key is None:
        if publisher.publish_comment(no_issue_key_comment(context.head_branch)):
            posted += 1
        return GateResult(
            status=VerdictStatus.FAILED,
            message=ISSUE_KEY_MISSING,
            violations=[ISSUE_KEY_MISSING],
            comments_posted=posted,
        )

    bind_run_context(issue_key=issue_key)
    logger.info("JIRA key -> %s", issue_key)
    ticket = jira.get_ticket_details(issue_key)
    labels = ()

    if not ticket.found:
        logger.warning("Jira issue %s could not be resolved", issue_key)
        if publisher.publish_comment(no_issue_key_comment(context.head_branch)):
            posted += 1
        violations.append(INVALID_ISSUE_KEY)
    else:
        labels = build_label_set(ticket, context.base_branch)
        publisher.publish_labels(labels)

        if not is_status_allowed(config.validate_issue_status, config.allowed_issue_statuses, ticket):
            logger.info("Issue %s status %r is not allowed", ticket.key, ticket.status)
            if publisher.publish_comment(invalid_status_comment(ticket.status, config.allowed_issue_statuses)):
                posted += 1
            violations.append(INVALID_ISSUE_STATUS)

        if should_update_description(context.body):
            publisher.publish_description(merge_description(context.body, ticket))

            if not config.skip_comments:
                if publisher.publish_comment(title_comment(ticket.summary, context.title)):
                    posted += 1
                if is_humongous(context.additions, config.pr_threshold):
                    if publisher.publish_comment(huge_pr_comment(context.additions, config.pr_threshold)):
                        posted += 1

    if violations:
        return GateResult(
            status=VerdictStatus.FAILED,
            message=join_violations(violations),
            issue_key=issue_key,
            labels=labels,
            violations=violations,
            comments_posted=posted,
        )
    return GateResult(
        status=VerdictStatus.PASSED,
        message=f"{issue_key} passed all checks.",
        issue_key=issue_key,
        labels=labels,
        comments_posted=posted,
    )
