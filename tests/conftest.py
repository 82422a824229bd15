"""
Shared fixtures - mocked hub session and request contexts
"""

import json
from unittest.mock import MagicMock, Mock

import pytest
import requests

from hubresolver.framework import FeatureFlags, Param, RequestContext
from hubresolver.hub.params import CONFIG_CATALOG, CONFIG_KIND

TEMPLATE = "https://hub.example.com/v1/resource/%s/%s/%s/%s/yaml"


def fake_response(status_code=200, body=b""):
    """A response mock usable as a context manager"""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = body
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def hub_body(yaml):
    return json.dumps({"data": {"yaml": yaml}}).encode("utf-8")


def make_params(**values):
    return [Param(name=name, value=value) for name, value in values.items()]


@pytest.fixture
def enabled_ctx():
    return RequestContext(
        feature_flags=FeatureFlags(enable_hub_resolver=True),
        resolver_config={CONFIG_CATALOG: "Tekton", CONFIG_KIND: "task"},
    )


@pytest.fixture
def disabled_ctx():
    return RequestContext(
        feature_flags=FeatureFlags(enable_hub_resolver=False),
        resolver_config={CONFIG_CATALOG: "Tekton", CONFIG_KIND: "task"},
    )


@pytest.fixture
def session():
    mock_session = Mock(spec=requests.Session)
    mock_session.get.return_value = fake_response(200, hub_body("kind: Task"))
    return mock_session
