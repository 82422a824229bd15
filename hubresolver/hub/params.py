"""
Hub Parameters - Validation and Installation Defaults

Pure functions: no network access. Validation only checks what the caller
supplied; resolution additionally fills omitted catalog/kind from the
installation configuration.
"""

import logging
from typing import Dict, List

from hubresolver.framework.context import RequestContext
from hubresolver.framework.errors import (
    ConfigurationError,
    InvalidParameterError,
    MissingDefaultError,
    MissingParameterError,
)
from hubresolver.framework.params import Param, params_to_map

logger = logging.getLogger(__name__)

# Request parameter names
PARAM_CATALOG = "catalog"
PARAM_KIND = "kind"
PARAM_NAME = "name"
PARAM_VERSION = "version"

# Installation configuration keys
CONFIG_CATALOG = "default-tekton-hub-catalog"
CONFIG_KIND = "default-kind"

VALID_KINDS = ("task", "pipeline")

DISABLED_ERROR = (
    "cannot handle resolution request, enable-hub-resolver feature flag not true"
)


def check_enabled(ctx: RequestContext) -> None:
    if not ctx.feature_flags.enable_hub_resolver:
        raise ConfigurationError(DISABLED_ERROR)


def _check_required(params_map: Dict[str, str]) -> None:
    for required in (PARAM_NAME, PARAM_VERSION):
        if required not in params_map:
            raise MissingParameterError(f"must include {required} param")


def _check_not_empty(params_map: Dict[str, str]) -> None:
    for key in (PARAM_CATALOG, PARAM_NAME, PARAM_VERSION):
        if not params_map[key]:
            raise MissingParameterError(f"{key} param must not be empty")


def _check_kind(kind: str) -> None:
    if kind not in VALID_KINDS:
        raise InvalidParameterError(
            f"kind param must be task or pipeline, got {kind!r}"
        )


def validate_params(ctx: RequestContext, params: List[Param]) -> None:
    """
    Check request parameters as supplied, without applying defaults

    Raises:
        ConfigurationError: The hub resolver is disabled
        MissingParameterError: name or version is absent
        InvalidParameterError: kind is present but not task/pipeline
    """
    check_enabled(ctx)

    params_map = params_to_map(params)
    _check_required(params_map)
    if PARAM_KIND in params_map:
        _check_kind(params_map[PARAM_KIND])


def resolve_params(ctx: RequestContext, params: List[Param]) -> Dict[str, str]:
    """
    Produce the full catalog/kind/name/version set for a request

    Omitted catalog and kind are taken from the installation configuration.

    Returns:
        Dict[str, str]: A new mapping; the caller's params are untouched

    Raises:
        ConfigurationError: The hub resolver is disabled
        MissingParameterError: name or version is absent, or catalog, name
            or version is empty
        MissingDefaultError: catalog/kind omitted and no installation default
        InvalidParameterError: The effective kind is not task/pipeline
    """
    check_enabled(ctx)

    params_map = params_to_map(params)
    _check_required(params_map)
    conf = ctx.resolver_config

    if PARAM_CATALOG not in params_map:
        if not conf.get(CONFIG_CATALOG):
            raise MissingDefaultError(
                "default catalog was not set during installation of the hub resolver"
            )
        params_map[PARAM_CATALOG] = conf[CONFIG_CATALOG]
        logger.debug(f"Using default catalog {params_map[PARAM_CATALOG]!r}")

    if PARAM_KIND not in params_map:
        if not conf.get(CONFIG_KIND):
            raise MissingDefaultError(
                "default resource kind was not set during installation of the hub resolver"
            )
        params_map[PARAM_KIND] = conf[CONFIG_KIND]
        logger.debug(f"Using default kind {params_map[PARAM_KIND]!r}")

    _check_not_empty(params_map)
    _check_kind(params_map[PARAM_KIND])
    return params_map
