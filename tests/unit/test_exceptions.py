from jira_node.exceptions import (
    JiraAuthenticationError,
    JiraNodeError,
    RemoteError,
    ValidationError,
)


def test_messages_are_prefixed():
    assert str(ValidationError("bad input")) == "Jira Error: bad input"
    assert ValidationError("bad input").message == "bad input"


def test_remote_error_includes_status_and_body():
    error = RemoteError("GET /issue/X failed", 404, '{"errorMessages":["gone"]}')

    assert str(error) == (
        'Jira Error: GET /issue/X failed (HTTP 404): {"errorMessages":["gone"]}'
    )
    assert error.status == 404


def test_remote_error_without_status():
    assert str(RemoteError("GET /issuetype failed")) == "Jira Error: GET /issuetype failed"


def test_hierarchy():
    assert issubclass(ValidationError, JiraNodeError)
    assert issubclass(RemoteError, JiraNodeError)
    assert issubclass(JiraAuthenticationError, RemoteError)
