import logging
from typing import Any, Dict, Optional

import requests

from issuegate.integrations.jira.types import TicketDetails, TicketProject, TicketType

logger = logging.getLogger(__name__)

STORY_POINTS_FIELD = "customfield_10016"
ISSUE_FIELDS = ",".join(["summary", "status", "issuetype", "project", "labels", STORY_POINTS_FIELD])


class JiraClientError(RuntimeError):
    """Base Jira integration error."""


class JiraDependencyTimeout(JiraClientError):
    """Raised when Jira API calls exceed configured timeout."""


class JiraDependencyUnavailable(JiraClientError):
    """Raised for transport/server errors from Jira dependency."""


class JiraAuthError(JiraClientError):
    """Raised when Jira rejects the configured credentials."""


class JiraClient:
    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        user: str = "",
        timeout_seconds: float = 5.0,
    ):
        self.base_url = (base_url or "").rstrip("/")
        self.headers = {"Accept": "application/json", "Content-Type": "application/json"}
        self.auth = None
        if user:
            self.auth = (user, token)
        else:
            # Token is an already encoded basic credential.
            self.headers["Authorization"] = f"Basic {token}"
        self.default_timeout_seconds = float(timeout_seconds)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        timeout: Optional[float] = None,
        **kwargs,
    ) -> requests.Response:
        effective_timeout = timeout if timeout is not None else self.default_timeout_seconds
        try:
            return requests.request(
                method.upper(),
                self._url(path),
                auth=self.auth,
                headers=self.headers,
                timeout=effective_timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            raise JiraDependencyTimeout(f"Jira {method.upper()} {path} timed out after {effective_timeout}s") from exc
        except requests.RequestException as exc:
            raise JiraDependencyUnavailable(f"Jira {method.upper()} {path} request failed: {exc}") from exc

    def ticket_url(self, key: str) -> str:
        return f"{self.base_url}/browse/{key}"

    def get_ticket_details(self, issue_key: str) -> TicketDetails:
        """
        Fetch a ticket and normalize it.
        Returns an empty TicketDetails when Jira reports the issue as missing.
        """
        resp = self._request(
            "GET",
            f"/rest/api/3/issue/{issue_key}",
            params={"fields": ISSUE_FIELDS},
        )
        if resp.status_code == 404:
            logger.info("Jira issue %s not found", issue_key)
            return TicketDetails()
        if resp.status_code in (401, 403):
            raise JiraAuthError(f"Jira rejected credentials with status {resp.status_code} for {issue_key}")
        if resp.status_code != 200:
            raise JiraDependencyUnavailable(
                f"Jira issue fetch failed with status {resp.status_code} for {issue_key}"
            )
        return self._to_details(resp.json() or {})

    def _to_details(self, payload: Dict[str, Any]) -> TicketDetails:
        key = str(payload.get("key") or "").strip()
        if not key:
            return TicketDetails()
        fields = payload.get("fields") or {}
        status = fields.get("status") or {}
        issue_type = fields.get("issuetype") or {}
        project = fields.get("project") or {}
        estimate = fields.get(STORY_POINTS_FIELD)
        return TicketDetails(
            key=key,
            summary=str(fields.get("summary") or ""),
            status=str(status.get("name") or ""),
            url=self.ticket_url(key),
            type=TicketType(
                name=str(issue_type.get("name") or ""),
                icon_url=str(issue_type.get("iconUrl") or ""),
            ),
            project=TicketProject(
                name=str(project.get("name") or ""),
                key=str(project.get("key") or ""),
            ),
            estimate=_format_estimate(estimate),
            labels=[str(label) for label in (fields.get("labels") or []) if str(label).strip()],
        )


def _format_estimate(value: Any) -> str:
    if value is None or value == "":
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
