"""
Hub Response Decoding and the Resolved Resource

The hub answers with {"data": {"yaml": "<definition>"}}. Only data.yaml is
kept; it is handed back as raw bytes without being parsed.
"""

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from hubresolver.framework.errors import DecodeError
from hubresolver.framework.resolver import ConfigSource

EMPTY_ANNOTATIONS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class HubResponse:
    yaml: str


def decode_hub_response(body: bytes) -> HubResponse:
    """
    Decode a hub response body

    Raises:
        DecodeError: body is not JSON, or data.yaml is missing or not a string
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors; RecursionError
        # comes from nesting too deep to parse
        raise DecodeError(f"error unmarshalling json response: {e}") from e

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise DecodeError("hub response has no 'data' object")

    yaml = data.get("yaml")
    if not isinstance(yaml, str):
        raise DecodeError("hub response has no 'data.yaml' string")

    return HubResponse(yaml=yaml)


@dataclass(frozen=True)
class ResolvedHubResource:
    """Content fetched from the hub, with no annotations and no source"""

    content: bytes

    def data(self) -> bytes:
        return self.content

    def annotations(self) -> Mapping[str, str]:
        return EMPTY_ANNOTATIONS

    def source(self) -> Optional[ConfigSource]:
        return None

    @classmethod
    def from_response(cls, response: HubResponse) -> "ResolvedHubResource":
        return cls(content=response.yaml.encode("utf-8"))
