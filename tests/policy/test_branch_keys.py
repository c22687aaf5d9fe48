import pytest

from issuegate.policy.branches import (
    authoritative_issue_key,
    extract_issue_keys,
    is_default_branch,
    should_skip_lint,
)


def test_extract_issue_keys_returns_matches_left_to_right():
    keys = extract_issue_keys("fix-1/ABC-12-then-XYZ-345")
    assert keys == ["FIX-1", "ABC-12", "XYZ-345"]
    assert authoritative_issue_key(keys) == "XYZ-345"


def test_suffix_key_wins_over_earlier_match():
    keys = extract_issue_keys("feature/OPS-9-refactor-ABC-123")
    assert authoritative_issue_key(keys) == "ABC-123"


@pytest.mark.parametrize(
    "branch,expected",
    [
        ("feature/ABC-42-foo", ["ABC-42"]),
        ("feature/abc-42-foo", ["ABC-42"]),
        ("chore/changelogUpdate_mojo-123", ["MOJO-123"]),
        ("PROJ2-7", ["PROJ2-7"]),
        ("feature/foo", []),
        ("feature/PLATFORMOPS-12", ["PLATFORMOPS-12"]),
        ("bugfix/customerbilling-7-rounding", ["CUSTOMERBILLING-7"]),
        ("feature/12-rounding", []),
        ("", []),
    ],
)
def test_extract_issue_keys_cases(branch, expected):
    assert extract_issue_keys(branch) == expected


def test_authoritative_issue_key_empty():
    assert authoritative_issue_key([]) is None


def test_should_skip_lint_uses_search_semantics():
    assert should_skip_lint("release/v1.2", r"^release/") is True
    assert should_skip_lint("hotfix/release-notes", "release") is True
    assert should_skip_lint("feature/ABC-1", r"^release/") is False


def test_empty_ignore_pattern_never_skips():
    assert should_skip_lint("release/v1.2", "") is False
    assert should_skip_lint("dependabot/npm/lodash", "") is False


@pytest.mark.parametrize(
    "branch,expected",
    [
        ("dependabot/npm_and_yarn/lodash-4.17.21", True),
        ("all-contributors/add-octocat", True),
        ("master", True),
        ("main", True),
        ("production", True),
        ("gh-pages", True),
        ("main-fixes-ABC-1", False),
        ("feature/ABC-1", False),
    ],
)
def test_is_default_branch(branch, expected):
    assert is_default_branch(branch) is expected
