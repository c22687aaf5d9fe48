"""
Pull request comment bodies.

Bodies are compared against existing PR comments to avoid reposting, so every
renderer here must stay deterministic for the same inputs.
"""
from __future__ import annotations

from typing import Sequence

from issuegate.utils.similarity import compare_strings

BRANCH_UNDETERMINED_COMMENT = "issuegate is unable to determine the head and base branch"

LOW_TITLE_SIMILARITY = 0.2
HIGH_TITLE_SIMILARITY = 0.4

_SAMPLE_BRANCHES = (
    "feature/shiny-new-feature--mojo-10",
    "chore/changelogUpdate_mojo-123",
    "bugfix/fix-some-strange-bug_GAL-2345",
)


def no_issue_key_comment(head_branch: str) -> str:
    samples = "\n".join(f"- `{name}`" for name in _SAMPLE_BRANCHES)
    return (
        "### A Jira issue key is missing from your branch name\n\n"
        f"Your branch: `{head_branch}`\n\n"
        "Branch names must end with the key of an existing Jira issue, "
        "for example `feature/short-description-ABC-123`. Without it the pull "
        "request cannot be linked to its ticket.\n\n"
        "Valid sample branch names:\n"
        f"{samples}\n\n"
        "Rename the branch (or open a new pull request from a correctly named branch) "
        "to re-run this check."
    )


def invalid_status_comment(status: str, allowed_statuses: Sequence[str]) -> str:
    allowed = ", ".join(allowed_statuses)
    return (
        "### The linked Jira issue is not in an allowed status\n\n"
        "| | |\n"
        "|---|---|\n"
        f"| Detected status | {status or 'unknown'} :x: |\n"
        f"| Allowed statuses | {allowed} :heavy_check_mark: |\n\n"
        "Move the issue to one of the allowed statuses and re-run the check."
    )


def title_comment(summary: str, title: str) -> str:
    """Compare the PR title against the ticket summary and grade the match."""
    score = compare_strings(summary, title)
    if score < LOW_TITLE_SIMILARITY:
        verdict = (
            "Your PR title and the issue summary look **quite different**. "
            "A PR title that resembles the issue summary makes it easier for "
            "reviewers to understand the context."
        )
    elif score <= HIGH_TITLE_SIMILARITY:
        verdict = (
            "Your PR title and the issue summary are **somewhat different**. "
            "Consider aligning them so reviewers can find the context quickly."
        )
    else:
        verdict = "Your PR title closely matches the issue summary. Nice work!"
    return (
        "### PR title check\n\n"
        f"{verdict}\n\n"
        "| | |\n"
        "|---|---|\n"
        f"| Issue summary | {summary} |\n"
        f"| PR title | {title} |"
    )


def huge_pr_comment(additions: int, threshold: int) -> str:
    return (
        "### This PR is too large to review comfortably :broken_heart:\n\n"
        f"It adds **{additions}** lines, above the threshold of **{threshold}**.\n\n"
        "Large pull requests are harder to review and more likely to hide bugs. "
        "Consider splitting it into smaller, incremental changes."
    )
