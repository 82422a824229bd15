"""
Request Context

Everything ambient a resolver needs for one call, passed in explicitly:
the feature flags, the installation configuration and an optional timeout.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from dotenv import dotenv_values

from hubresolver.coreutils.env import env_flag, env_get

logger = logging.getLogger(__name__)

ENABLE_HUB_RESOLVER_ENV = "ENABLE_HUB_RESOLVER"
RESOLVER_CONFIG_ENV = "HUB_RESOLVER_CONFIG"


@dataclass(frozen=True)
class FeatureFlags:
    enable_hub_resolver: bool = False


@dataclass(frozen=True)
class RequestContext:
    """Per-call context handed to every resolver operation

    Attributes:
        feature_flags: Global gates; a disabled resolver rejects every call
        resolver_config: Installation configuration (read-only)
        timeout: Per-read socket timeout in seconds for the outbound fetch, if
            any. It bounds each connect and read, not the whole fetch
    """

    feature_flags: FeatureFlags = field(default_factory=FeatureFlags)
    resolver_config: Mapping[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(
            self, "resolver_config", MappingProxyType(dict(self.resolver_config))
        )

    @classmethod
    def from_env(
        cls,
        config_path: Optional[Union[str, Path]] = None,
        timeout: Optional[float] = None,
    ) -> "RequestContext":
        """Build a context from environment variables and a config file

        Args:
            config_path: Installation configuration file; falls back to
                $HUB_RESOLVER_CONFIG, then to an empty configuration
            timeout: Optional per-read socket timeout in seconds
        """
        config_path = config_path or env_get(RESOLVER_CONFIG_ENV)
        resolver_config = load_resolver_config(config_path) if config_path else {}
        return cls(
            feature_flags=load_feature_flags(),
            resolver_config=resolver_config,
            timeout=timeout,
        )


def load_feature_flags() -> FeatureFlags:
    """Read feature flags from the environment (.env honored)"""
    return FeatureFlags(enable_hub_resolver=env_flag(ENABLE_HUB_RESOLVER_ENV))


def load_resolver_config(path: Union[str, Path]) -> dict[str, str]:
    """Load installation configuration from a key=value file

    Keys without a value are dropped.

    Raises:
        FileNotFoundError: If the path is missing or not a regular file
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Resolver config not found: {path}")

    values = dotenv_values(path)
    config = {key: value for key, value in values.items() if value is not None}
    logger.debug(f"Loaded resolver config from {path}: {sorted(config)}")
    return config
