"""
Resolver Framework - The Host Contract

What a resolution host expects from a resolver, and what it passes in.
- Resolver / ResolvedResource capability protocols
- Request parameter types
- Per-request context (feature flags, installation configuration)
- Error hierarchy surfaced to the host
"""

from .context import FeatureFlags, RequestContext, load_feature_flags, load_resolver_config
from .errors import (
    ResolutionError,
    ConfigurationError,
    MissingParameterError,
    InvalidParameterError,
    MissingDefaultError,
    FetchError,
    NotFoundError,
    DecodeError,
)
from .params import Param, ParamType, ParamValue
from .resolver import LABEL_KEY_RESOLVER_TYPE, ConfigSource, ResolvedResource, Resolver

__all__ = [
    "FeatureFlags",
    "RequestContext",
    "load_feature_flags",
    "load_resolver_config",
    "ResolutionError",
    "ConfigurationError",
    "MissingParameterError",
    "InvalidParameterError",
    "MissingDefaultError",
    "FetchError",
    "NotFoundError",
    "DecodeError",
    "Param",
    "ParamType",
    "ParamValue",
    "LABEL_KEY_RESOLVER_TYPE",
    "ConfigSource",
    "ResolvedResource",
    "Resolver",
]
