"""Ticket summary block managed inside the pull request description."""

import re

from issuegate.integrations.jira.types import TicketDetails

TICKET_BLOCK_START = "<!-- issuegate:ticket:start -->"
TICKET_BLOCK_END = "<!-- issuegate:ticket:end -->"
SKIP_DESCRIPTION_MARKER = "<!-- issuegate:skip-description -->"

_TICKET_BLOCK_RE = re.compile(
    re.escape(TICKET_BLOCK_START) + r".*?" + re.escape(TICKET_BLOCK_END),
    re.DOTALL,
)


def should_update_description(body: str) -> bool:
    """Authors opt out of description updates with the skip marker."""
    return SKIP_DESCRIPTION_MARKER not in (body or "")


def _cell(value: str) -> str:
    text = " ".join((value or "").split())
    return text.replace("|", "\\|") or "N/A"


def render_ticket_block(ticket: TicketDetails) -> str:
    key = ticket.key.upper()
    heading = f"[{key}]({ticket.url})" if ticket.url else key
    labels = ", ".join(f"`{label}`" for label in ticket.labels) or "N/A"
    return (
        f"{TICKET_BLOCK_START}\n"
        f"### Jira: {heading}\n\n"
        "| | |\n"
        "|---|---|\n"
        f"| Summary | {_cell(ticket.summary)} |\n"
        f"| Project | {_cell(ticket.project_name)} |\n"
        f"| Type | {_cell(ticket.type_name)} |\n"
        f"| Status | {_cell(ticket.status)} |\n"
        f"| Points | {_cell(ticket.estimate)} |\n"
        f"| Labels | {labels} |\n\n"
        "---\n"
        f"{TICKET_BLOCK_END}"
    )


def strip_ticket_block(body: str) -> str:
    return _TICKET_BLOCK_RE.sub("", body or "").strip()


def merge_description(body: str, ticket: TicketDetails) -> str:
    """
    Put a fresh ticket block at the top of the description.
    Any block inserted by an earlier run is replaced, never duplicated.
    """
    remainder = strip_ticket_block(body)
    block = render_ticket_block(ticket)
    if not remainder:
        return block
    return f"{block}\n\n{remainder}"
