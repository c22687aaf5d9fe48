from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class VerdictStatus(str, Enum):
    PASSED = "PASSED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


class GateResult(BaseModel):
    """
    Outcome of a single gate run.
    Only FAILED maps to a non-zero exit code.
    """
    status: VerdictStatus
    message: str = ""
    issue_key: Optional[str] = None
    labels: Tuple[str, ...] = ()
    violations: List[str] = Field(default_factory=list)
    comments_posted: int = 0

    @property
    def failed(self) -> bool:
        return self.status == VerdictStatus.FAILED

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


def join_violations(violations: List[str]) -> str:
    """Join violation sentences into a single sentence ending with one period."""
    parts = [v.strip().rstrip(".") for v in violations if v and v.strip()]
    if not parts:
        return ""
    return ", ".join(parts) + "."
