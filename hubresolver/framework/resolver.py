"""
Resolver Capability Contracts

The host drives any resolver through these protocols. Implementations only
need to match the shape; no base class is involved.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Protocol, runtime_checkable

from .context import RequestContext
from .params import Param

# Label on resolution requests that routes them to a resolver
LABEL_KEY_RESOLVER_TYPE = "resolution.tekton.dev/type"


@dataclass(frozen=True)
class ConfigSource:
    """Where resolved content came from: location, digests and entry point"""

    uri: str = ""
    digest: Dict[str, str] = field(default_factory=dict)
    entry_point: str = ""


@runtime_checkable
class ResolvedResource(Protocol):
    def data(self) -> bytes:
        ...

    def annotations(self) -> Mapping[str, str]:
        ...

    def source(self) -> Optional[ConfigSource]:
        ...


@runtime_checkable
class Resolver(Protocol):
    def initialize(self, ctx: RequestContext) -> None:
        """Set up any dependencies the resolver needs"""
        ...

    def get_name(self, ctx: RequestContext) -> str:
        """Name to refer to this resolver by"""
        ...

    def get_config_name(self, ctx: RequestContext) -> str:
        """Name of the configuration map holding installation defaults"""
        ...

    def get_selector(self, ctx: RequestContext) -> Dict[str, str]:
        """Labels matching the requests this resolver handles"""
        ...

    def validate_params(self, ctx: RequestContext, params: List[Param]) -> None:
        """Raise a ResolutionError if the request parameters are unusable"""
        ...

    def resolve(self, ctx: RequestContext, params: List[Param]) -> ResolvedResource:
        """Fetch the requested resource"""
        ...
