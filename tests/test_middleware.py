"""
Tests for request logging middleware helpers
"""

import pytest

from blogql.logging import (
    clear_request_context,
    generate_request_id,
    get_request_id,
    operation_ctx,
    set_request_context,
)
from blogql.middleware import operation_name_from_payload


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"operationName": "Feed", "query": "query Other { users { id } }"}, "Feed"),
        ({"query": "query Feed { posts { id } }"}, "Feed"),
        ({"query": "mutation AddUser { createUser(data: {name: \"A\", email: \"a\"}) { id } }"},
         "mutation:AddUser"),
        ({"query": "{ comments { id } }"}, "unnamed_operation"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({}, None),
        ({"query": 42}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected


def test_request_context_roundtrip():
    set_request_context(request_id="req-123", operation="Feed")

    assert get_request_id() == "req-123"
    assert operation_ctx.get() == "Feed"

    clear_request_context()

    assert get_request_id() is None
    assert operation_ctx.get() is None


def test_generated_request_ids():
    set_request_context()
    assert get_request_id() is not None
    clear_request_context()

    ids = {generate_request_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(len(i) == 14 for i in ids)
