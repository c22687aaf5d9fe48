from unittest.mock import MagicMock, patch

import pytest
import requests

from issuegate.integrations.jira.client import (
    ISSUE_FIELDS,
    STORY_POINTS_FIELD,
    JiraAuthError,
    JiraClient,
    JiraDependencyTimeout,
    JiraDependencyUnavailable,
)


def _response(status_code, payload=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


ISSUE_PAYLOAD = {
    "key": "ABC-42",
    "fields": {
        "summary": "Add login page",
        "status": {"name": "In Progress"},
        "issuetype": {"name": "Story", "iconUrl": "https://example.atlassian.net/story.svg"},
        "project": {"name": "Payments", "key": "ABC"},
        "labels": ["frontend", ""],
        STORY_POINTS_FIELD: 3.0,
    },
}


def test_ticket_details_are_normalized():
    client = JiraClient("https://example.atlassian.net/", "encoded-token")
    with patch("issuegate.integrations.jira.client.requests.request", return_value=_response(200, ISSUE_PAYLOAD)) as req:
        ticket = client.get_ticket_details("ABC-42")

    assert ticket.found
    assert ticket.key == "ABC-42"
    assert ticket.summary == "Add login page"
    assert ticket.status == "In Progress"
    assert ticket.url == "https://example.atlassian.net/browse/ABC-42"
    assert ticket.type_name == "Story"
    assert ticket.type.icon_url == "https://example.atlassian.net/story.svg"
    assert ticket.project_name == "Payments"
    assert ticket.project.key == "ABC"
    assert ticket.estimate == "3"
    assert ticket.labels == ["frontend"]

    args, kwargs = req.call_args
    assert args == ("GET", "https://example.atlassian.net/rest/api/3/issue/ABC-42")
    assert kwargs["params"] == {"fields": ISSUE_FIELDS}
    assert kwargs["timeout"] == 5.0


def test_encoded_token_is_sent_as_basic_header():
    client = JiraClient("https://example.atlassian.net", "encoded-token")
    with patch("issuegate.integrations.jira.client.requests.request", return_value=_response(200, ISSUE_PAYLOAD)) as req:
        client.get_ticket_details("ABC-42")
    kwargs = req.call_args.kwargs
    assert kwargs["headers"]["Authorization"] == "Basic encoded-token"
    assert kwargs["auth"] is None


def test_user_and_token_use_basic_auth_tuple():
    client = JiraClient("https://example.atlassian.net", "api-token", user="bot@example.com", timeout_seconds=2)
    with patch("issuegate.integrations.jira.client.requests.request", return_value=_response(200, ISSUE_PAYLOAD)) as req:
        client.get_ticket_details("ABC-42")
    kwargs = req.call_args.kwargs
    assert kwargs["auth"] == ("bot@example.com", "api-token")
    assert "Authorization" not in kwargs["headers"]
    assert kwargs["timeout"] == 2.0


def test_missing_issue_returns_empty_details():
    client = JiraClient("https://example.atlassian.net", "token")
    with patch("issuegate.integrations.jira.client.requests.request", return_value=_response(404, {})):
        ticket = client.get_ticket_details("ABC-404")
    assert not ticket.found
    assert ticket.project_name == ""
    assert ticket.type_name == ""


def test_missing_estimate_is_empty():
    payload = {"key": "ABC-42", "fields": {"summary": "x", STORY_POINTS_FIELD: None}}
    client = JiraClient("https://example.atlassian.net", "token")
    with patch("issuegate.integrations.jira.client.requests.request", return_value=_response(200, payload)):
        ticket = client.get_ticket_details("ABC-42")
    assert ticket.estimate == ""
    assert ticket.status == ""


@pytest.mark.parametrize("status_code", [401, 403])
def test_rejected_credentials_raise_auth_error(status_code):
    client = JiraClient("https://example.atlassian.net", "token")
    with patch("issuegate.integrations.jira.client.requests.request", return_value=_response(status_code)):
        with pytest.raises(JiraAuthError):
            client.get_ticket_details("ABC-42")


def test_server_error_raises_unavailable():
    client = JiraClient("https://example.atlassian.net", "token")
    with patch("issuegate.integrations.jira.client.requests.request", return_value=_response(503)):
        with pytest.raises(JiraDependencyUnavailable, match="status 503"):
            client.get_ticket_details("ABC-42")


def test_timeout_is_mapped():
    client = JiraClient("https://example.atlassian.net", "token", timeout_seconds=1.5)
    with patch("issuegate.integrations.jira.client.requests.request", side_effect=requests.Timeout("slow")):
        with pytest.raises(JiraDependencyTimeout, match="timed out after 1.5s"):
            client.get_ticket_details("ABC-42")


def test_connection_error_is_mapped():
    client = JiraClient("https://example.atlassian.net", "token")
    with patch("issuegate.integrations.jira.client.requests.request", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(JiraDependencyUnavailable, match="request failed"):
            client.get_ticket_details("ABC-42")
