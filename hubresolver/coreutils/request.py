import http.cookiejar

from urllib3.util.retry import Retry
import requests
from requests.adapters import HTTPAdapter


# Failed fetches are reported to the caller as-is; the host decides on retries.
NO_RETRY_STRATEGY = Retry(total=0, read=False)


def new_session() -> requests.Session:
    """Create a new requests session that never retries and keeps no cookies"""
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=NO_RETRY_STRATEGY)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    # Set-Cookie from one fetch must not reach the next one
    session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))

    return session
