"""Fixtures for templates module tests."""

import copy
import json

import pytest

BASE_INVOCATION = {
    "config": {"templates": {"text": "Hello! You asked: {{payload.text}}"}},
    "msg": {
        "id": "msg-1",
        "channel": "webchat",
        "tenant": {"env": "dev", "tenant": "acme"},
        "session_id": "session-1",
        "text": "weather?",
        "metadata": {},
    },
    "payload": {"text": "weather?"},
}


@pytest.fixture
def make_invocation():
    """Factory building invocation documents.

    Keyword args:
        templates: merged into ``config.templates``
        config: merged into ``config`` (top level)
        metadata: replaces ``msg.metadata``
        tenant: merged into ``msg.tenant``
        session_id: replaces ``msg.session_id``
        payload: replaces ``payload``
    """

    def _make(
        templates=None,
        config=None,
        metadata=None,
        tenant=None,
        session_id=None,
        payload=None,
    ):
        document = copy.deepcopy(BASE_INVOCATION)
        if templates is not None:
            document["config"]["templates"].update(templates)
        if config is not None:
            document["config"].update(config)
        if metadata is not None:
            document["msg"]["metadata"] = metadata
        if tenant is not None:
            document["msg"]["tenant"].update(tenant)
        if session_id is not None:
            document["msg"]["session_id"] = session_id
        if payload is not None:
            document["payload"] = payload
        return document

    return _make


@pytest.fixture
def invocation_json(make_invocation):
    """Factory building invocation documents serialized as JSON."""

    def _make(**kwargs):
        return json.dumps(make_invocation(**kwargs))

    return _make
