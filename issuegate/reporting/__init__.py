from __future__ import annotations

from issuegate.reporting.actions import escape_data, set_failed, set_output

__all__ = [
    "escape_data",
    "set_failed",
    "set_output",
]
