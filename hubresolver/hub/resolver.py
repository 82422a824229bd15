"""
Hub Resolver

Builds the hub URL from resolved parameters, performs one GET and decodes the
response. Holds no per-request state; the URL template and the HTTP session
are fixed at construction.
"""

import logging
import time
from typing import Dict, List, Optional

import requests

from hubresolver.coreutils.env import env_get
from hubresolver.coreutils.request import new_session
from hubresolver.framework.context import RequestContext
from hubresolver.framework.errors import FetchError, NotFoundError
from hubresolver.framework.params import Param
from hubresolver.framework.resolver import LABEL_KEY_RESOLVER_TYPE
from . import params as hub_params
from .resource import ResolvedHubResource, decode_hub_response

logger = logging.getLogger(__name__)

# Value of the resolver type label on requests meant for this resolver
LABEL_VALUE_HUB_RESOLVER_TYPE = "hub"

RESOLVER_NAME = "Hub"
CONFIG_MAP_NAME = "hubresolver-config"

DEFAULT_HUB_API = "https://api.hub.tekton.dev/"
YAML_ENDPOINT = "v1/resource/%s/%s/%s/%s/yaml"


def default_hub_url() -> str:
    """URL template from $HUB_API plus the yaml endpoint"""
    api = env_get("HUB_API", DEFAULT_HUB_API)
    return api.rstrip("/") + "/" + YAML_ENDPOINT


def build_url(template: str, resolved: Dict[str, str]) -> str:
    """Substitute catalog, kind, name, version (in that order) into template

    Values are inserted verbatim, without URL encoding.
    """
    return template % (
        resolved[hub_params.PARAM_CATALOG],
        resolved[hub_params.PARAM_KIND],
        resolved[hub_params.PARAM_NAME],
        resolved[hub_params.PARAM_VERSION],
    )


class HubResolver:
    """Resolves task and pipeline definitions from the hub"""

    def __init__(
        self,
        hub_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.hub_url = hub_url or default_hub_url()
        self.session = session or new_session()

    def initialize(self, ctx: RequestContext) -> None:
        """Nothing to set up"""

    def get_name(self, ctx: RequestContext) -> str:
        return RESOLVER_NAME

    def get_config_name(self, ctx: RequestContext) -> str:
        return CONFIG_MAP_NAME

    def get_selector(self, ctx: RequestContext) -> Dict[str, str]:
        return {LABEL_KEY_RESOLVER_TYPE: LABEL_VALUE_HUB_RESOLVER_TYPE}

    def validate_params(self, ctx: RequestContext, params: List[Param]) -> None:
        hub_params.validate_params(ctx, params)

    def resolve(self, ctx: RequestContext, params: List[Param]) -> ResolvedHubResource:
        """
        Fetch the requested task or pipeline from the hub

        Raises:
            ConfigurationError, MissingParameterError, MissingDefaultError,
            InvalidParameterError: Before any network access
            FetchError: The hub could not be reached or the body not read
            NotFoundError: The hub answered with a non-200 status
            DecodeError: The body is not the expected envelope
        """
        resolved = hub_params.resolve_params(ctx, params)
        url = build_url(self.hub_url, resolved)
        body = self._fetch(url, ctx.timeout)
        return ResolvedHubResource.from_response(decode_hub_response(body))

    def _fetch(self, url: str, timeout: Optional[float]) -> bytes:
        logger.info(f"Fetching from {url}")
        start_time = time.time()

        try:
            response = self.session.get(url, timeout=timeout, stream=True)
        except requests.exceptions.RequestException as e:
            raise FetchError(f"error requesting resource from hub: {e}") from e

        with response:
            if response.status_code != 200:
                raise NotFoundError(url, response.status_code)
            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                raise FetchError(f"error reading response body: {e}") from e

        elapsed = time.time() - start_time
        logger.info(f"Fetched from {url}: {elapsed:.2f} seconds")
        return body


# Convenience function for direct use
def resolve(
    ctx: RequestContext, params: List[Param], hub_url: Optional[str] = None
) -> ResolvedHubResource:
    """Convenience function to resolve one request with a fresh resolver"""
    resolver = HubResolver(hub_url=hub_url)
    return resolver.resolve(ctx, params)
