"""
Hub Layer - Resolve Tasks and Pipelines From the Hub

- params: validation and installation defaults, no I/O
- resource: response envelope decoding and the resolved resource value
- resolver: URL construction and the single outbound fetch
"""

from .resolver import HubResolver, LABEL_VALUE_HUB_RESOLVER_TYPE

__all__ = ["HubResolver", "LABEL_VALUE_HUB_RESOLVER_TYPE"]
