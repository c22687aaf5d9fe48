class IssueGateError(RuntimeError):
    """Base issuegate error."""


class GateConfigError(IssueGateError):
    """Raised when action inputs are missing or malformed."""


class GateContextError(IssueGateError):
    """Raised when the triggering event lacks pull request context."""
