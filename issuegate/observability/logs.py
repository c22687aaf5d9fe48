"""
Logging for gate runs.

Every record carries the run context (repository, pull request, issue key)
bound by the gate. Three output formats are supported:

- ``actions``: plain text, with warnings and debug records emitted as
  workflow commands so the runner annotates them (default on a runner)
- ``text``: plain text (default elsewhere)
- ``json``: one JSON object per line
"""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, Optional

from issuegate.reporting.actions import escape_data

CONTEXT_FIELDS = ("repository", "pull_request", "issue_key")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_run_context: Dict[str, str] = {}


def bind_run_context(**fields: object) -> None:
    """Attach fields (see CONTEXT_FIELDS) to every subsequent log record."""
    for name, value in fields.items():
        if name not in CONTEXT_FIELDS:
            raise ValueError(f"Unknown log context field: {name}")
        if value in (None, ""):
            _run_context.pop(name, None)
        else:
            _run_context[name] = str(value)


def clear_run_context() -> None:
    _run_context.clear()


def current_run_context() -> Dict[str, str]:
    return dict(_run_context)


class RunContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_context = current_run_context()
        return True


def _context_of(record: logging.LogRecord) -> Dict[str, str]:
    context = getattr(record, "run_context", None)
    return context if isinstance(context, dict) else {}


def _context_suffix(context: Dict[str, str]) -> str:
    parts = [f"{name}={context[name]}" for name in CONTEXT_FIELDS if context.get(name)]
    return f" [{' '.join(parts)}]" if parts else ""


class TextLogFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        return super().format(record) + _context_suffix(_context_of(record))


class ActionsLogFormatter(logging.Formatter):
    """
    Renders records for a GitHub Actions log. Warnings and debug records
    become ::warning:: / ::debug:: commands; errors stay plain text since
    the CLI reports the failure itself with ::error::.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage() + _context_suffix(_context_of(record))
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if record.levelno == logging.WARNING:
            return f"::warning::{escape_data(message)}"
        if record.levelno < logging.INFO:
            return f"::debug::{escape_data(message)}"
        return f"{record.levelname} {record.name} {message}"


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_context_of(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def default_log_format() -> str:
    return "actions" if os.getenv("GITHUB_ACTIONS", "").lower() == "true" else "text"


def build_formatter(log_format: Optional[str] = None) -> logging.Formatter:
    name = (log_format or os.getenv("ISSUEGATE_LOG_FORMAT", "") or default_log_format()).strip().lower()
    if name == "json":
        return JsonLogFormatter()
    if name == "actions":
        return ActionsLogFormatter()
    return TextLogFormatter()


def configure_logging(log_format: Optional[str] = None) -> None:
    """Configure the root logger from ISSUEGATE_LOG_LEVEL / ISSUEGATE_LOG_FORMAT."""
    log_level = (os.getenv("ISSUEGATE_LOG_LEVEL", "INFO") or "INFO").upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    formatter = build_formatter(log_format)

    if not root.handlers:
        root.addHandler(logging.StreamHandler())

    for handler in root.handlers:
        handler.setFormatter(formatter)
        if not any(isinstance(f, RunContextFilter) for f in handler.filters):
            handler.addFilter(RunContextFilter())
