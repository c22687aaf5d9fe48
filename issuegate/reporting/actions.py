from __future__ import annotations

import os
import sys
from typing import Optional, TextIO


def escape_data(value: str) -> str:
    """Escape a workflow command message the same way the Actions toolkit does."""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str, stream: Optional[TextIO] = None) -> None:
    """Emit an ::error:: workflow command so the runner surfaces the failure."""
    out = stream or sys.stdout
    out.write(f"::error::{escape_data(message)}\n")
    out.flush()


def set_output(name: str, value: str) -> bool:
    """
    Append an output to $GITHUB_OUTPUT.
    Returns False outside of a runner that provides the file.
    """
    path = os.getenv("GITHUB_OUTPUT", "")
    if not path:
        return False
    text = str(value).replace("\r", " ").replace("\n", " ")
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"{name}={text}\n")
    return True
