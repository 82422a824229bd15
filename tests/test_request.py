"""
Test HTTP session helpers - no retries, no cookies carried between fetches
"""

import email.message
from unittest.mock import Mock

import requests
from requests.cookies import MockRequest

from hubresolver.coreutils.request import new_session

URL = "https://hub.example.com/v1/resource/Tekton/task/git-clone/0.9/yaml"


def test_new_session_does_not_retry():
    adapter = new_session().get_adapter(URL)
    assert adapter.max_retries.total == 0


def test_new_session_drops_cookies_between_fetches():
    session = new_session()
    first = session.prepare_request(requests.Request("GET", URL))

    headers = email.message.Message()
    headers["Set-Cookie"] = "session=abc; Path=/"
    response = Mock()
    response.info.return_value = headers
    session.cookies.extract_cookies(response, MockRequest(first))

    assert len(session.cookies) == 0
    second = session.prepare_request(requests.Request("GET", URL))
    assert "Cookie" not in second.headers
