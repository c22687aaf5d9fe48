import argparse
import json
import logging
import sys
from typing import List, Optional

from issuegate import __version__
from issuegate.observability.logs import configure_logging
from issuegate.policy.branches import authoritative_issue_key, extract_issue_keys
from issuegate.reporting.actions import set_failed, set_output

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="issuegate")
    sub = p.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="Gate the pull request from the current GitHub Actions event.")
    run_p.add_argument("--event-path", help="Event payload JSON (defaults to GITHUB_EVENT_PATH)")
    run_p.add_argument("--config", help="Optional YAML file with default inputs")

    keys_p = sub.add_parser("extract-keys", help="Print the Jira issue keys found in a branch name.")
    keys_p.add_argument("branch", help="Branch name")
    keys_p.add_argument("--format", default="text", choices=["text", "json"])

    sub.add_parser("version", help="Print version.")
    return p


def _run(args: argparse.Namespace) -> int:
    from issuegate.config import load_config
    from issuegate.context.builder import build_pull_request_context, load_event_payload
    from issuegate.decision.types import VerdictStatus
    from issuegate.gate import run_gate
    from issuegate.integrations.github.client import GitHubClient
    from issuegate.integrations.jira.client import JiraClient

    try:
        config = load_config(config_path=args.config)
        context = build_pull_request_context(load_event_payload(args.event_path))
        github = GitHubClient(config.github_token)
        jira = JiraClient(
            config.jira_base_url,
            config.jira_token,
            user=config.jira_user,
            timeout_seconds=config.jira_timeout_seconds,
        )
        result = run_gate(config, context, github, jira)
    except Exception as exc:
        logger.exception("issuegate run failed")
        set_output("verdict", VerdictStatus.FAILED.value)
        set_failed(str(exc))
        return 1

    set_output("verdict", result.status.value)
    set_output("issue-key", result.issue_key or "")
    if result.failed:
        set_failed(result.message)
    else:
        logger.info("%s: %s", result.status.value, result.message)
    return result.exit_code


def _extract_keys(args: argparse.Namespace) -> int:
    keys = extract_issue_keys(args.branch)
    issue_key = authoritative_issue_key(keys)
    if args.format == "json":
        print(json.dumps({"branch": args.branch, "keys": keys, "issue_key": issue_key}, indent=2))
    else:
        for key in keys:
            print(key)
        if issue_key:
            print(f"authoritative: {issue_key}")
        else:
            print("No Jira issue key found.", file=sys.stderr)
    return 0 if issue_key else 1


def main(argv: Optional[List[str]] = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    # If no arguments provided, show help
    if not args_list:
        args_list.append("--help")

    p = build_parser()
    args = p.parse_args(args_list)
    configure_logging()

    if args.cmd == "version":
        print(f"issuegate {__version__}")
        return 0
    if args.cmd == "extract-keys":
        return _extract_keys(args)
    if args.cmd == "run":
        return _run(args)

    p.print_help()
    return 2


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
