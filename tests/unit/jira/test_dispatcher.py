"""Tests for running operations over a batch of input records."""

import logging
from unittest.mock import MagicMock

import pytest

from jira_node.exceptions import RemoteError, ValidationError


def test_execute_flattens_list_results(make_node):
    """Test that list results are spliced into one flat output."""
    node = make_node(
        {"resource": "issue", "operation": "getAll", "limit": 2},
        items=[{"options": {"jql": "project = A"}}, {"options": {"jql": "project = B"}}],
    )
    node.request = MagicMock(
        side_effect=[
            {"issues": [{"key": "A-1"}, {"key": "A-2"}]},
            {"issues": [{"key": "B-1"}]},
        ]
    )

    assert node.execute() == [{"key": "A-1"}, {"key": "A-2"}, {"key": "B-1"}]
    assert node.request.call_args_list[1].args[2]["jql"] == "project = B"


def test_execute_appends_single_results(make_node):
    node = make_node(
        {"operation": "get"},
        items=[{"issueKey": "PROJ-1"}, {"issueKey": "PROJ-2"}],
    )
    node.request = MagicMock(side_effect=lambda path, method, query: {"self": path})

    assert node.execute() == [{"self": "/issue/PROJ-1"}, {"self": "/issue/PROJ-2"}]


def test_execute_operation_resolved_once(make_node):
    """Test that the operation of the first record applies to the whole batch."""
    node = make_node(
        {"operation": "delete"},
        items=[{"issueKey": "PROJ-1"}, {"issueKey": "PROJ-2", "operation": "get"}],
    )
    node.request = MagicMock(return_value={})

    assert node.execute() == [{}, {}]
    assert [c.args[1] for c in node.request.call_args_list] == ["DELETE", "DELETE"]


def test_execute_stops_on_first_failure(make_node):
    node = make_node(
        {"operation": "get"},
        items=[{"issueKey": "PROJ-1"}, {"issueKey": "PROJ-2"}, {"issueKey": "PROJ-3"}],
    )
    node.request = MagicMock(
        side_effect=[{"key": "PROJ-1"}, RemoteError("GET failed", 404, "gone")]
    )

    with pytest.raises(RemoteError):
        node.execute()
    assert node.request.call_count == 2


def test_execute_empty_batch(make_node):
    node = make_node({"operation": "get"}, items=[])
    node.request = MagicMock()

    assert node.execute() == []
    node.request.assert_not_called()


def test_execute_unknown_operation(make_node):
    node = make_node({"operation": "archive"})

    with pytest.raises(ValidationError, match="operation 'archive'"):
        node.execute()


def test_execute_unknown_resource(make_node):
    node = make_node({"resource": "board", "operation": "get"})

    with pytest.raises(ValidationError, match="resource 'board'"):
        node.execute()


def test_execute_missing_operation(make_node):
    node = make_node({})

    with pytest.raises(ValidationError, match="operation"):
        node.execute()


def test_execute_logs_invalid_item(make_node, caplog):
    node = make_node({"operation": "get"}, items=[{"issueKey": "PROJ-1"}, {}])
    node.request = MagicMock(return_value={"key": "PROJ-1"})

    with caplog.at_level(logging.ERROR, logger="jira-node"):
        with pytest.raises(ValidationError, match="issueKey"):
            node.execute()
    assert "Item 1 is invalid" in caplog.text
