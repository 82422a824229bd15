"""
Test Hub Parameters - validation and installation defaults
"""

import pytest

from hubresolver.framework import (
    ConfigurationError,
    FeatureFlags,
    InvalidParameterError,
    MissingDefaultError,
    MissingParameterError,
    Param,
    ParamType,
    ParamValue,
    RequestContext,
)
from hubresolver.framework.params import params_to_map
from hubresolver.hub.params import (
    CONFIG_CATALOG,
    CONFIG_KIND,
    resolve_params,
    validate_params,
)

from conftest import make_params


def test_params_to_map_last_write_wins():
    params = [
        Param(name="name", value="first"),
        Param(name="version", value="0.1"),
        Param(name="name", value="second"),
    ]
    assert params_to_map(params) == {"name": "second", "version": "0.1"}


def test_params_to_map_uses_string_value_of_typed_values():
    params = [
        Param(name="name", value=ParamValue(type=ParamType.STRING, string_val="git-clone")),
        Param(name="version", value="0.9"),
    ]
    assert params_to_map(params) == {"name": "git-clone", "version": "0.9"}


def test_param_parse():
    assert Param.parse("name=git-clone") == Param(name="name", value="git-clone")
    assert Param.parse("url=a=b").string_value == "a=b"
    with pytest.raises(ValueError):
        Param.parse("name")


@pytest.mark.parametrize(
    "values",
    [
        {"version": "0.9"},
        {"name": "git-clone"},
        {},
        {"catalog": "Tekton", "kind": "task"},
    ],
)
def test_validate_requires_name_and_version(enabled_ctx, values):
    with pytest.raises(MissingParameterError):
        validate_params(enabled_ctx, make_params(**values))


@pytest.mark.parametrize("kind", ["task", "pipeline"])
def test_validate_accepts_known_kinds(enabled_ctx, kind):
    validate_params(enabled_ctx, make_params(name="git-clone", version="0.9", kind=kind))


@pytest.mark.parametrize("kind", ["Task", "stepaction", ""])
def test_validate_rejects_unknown_kind(enabled_ctx, kind):
    with pytest.raises(InvalidParameterError):
        validate_params(enabled_ctx, make_params(name="git-clone", version="0.9", kind=kind))


def test_validate_ignores_installation_defaults():
    """A missing kind is fine at validation even with a bad default configured"""
    ctx = RequestContext(
        feature_flags=FeatureFlags(enable_hub_resolver=True),
        resolver_config={CONFIG_KIND: "bogus"},
    )
    validate_params(ctx, make_params(name="git-clone", version="0.9"))


def test_validate_fails_when_disabled(disabled_ctx):
    with pytest.raises(ConfigurationError):
        validate_params(disabled_ctx, make_params(name="git-clone", version="0.9", kind="task"))


def test_resolve_params_fills_defaults(enabled_ctx):
    resolved = resolve_params(enabled_ctx, make_params(name="git-clone", version="0.9"))
    assert resolved == {
        "catalog": "Tekton",
        "kind": "task",
        "name": "git-clone",
        "version": "0.9",
    }


def test_resolve_params_request_overrides_defaults(enabled_ctx):
    resolved = resolve_params(
        enabled_ctx,
        make_params(name="build", version="1.0", catalog="Mine", kind="pipeline"),
    )
    assert resolved["catalog"] == "Mine"
    assert resolved["kind"] == "pipeline"


def test_resolve_params_missing_default_catalog():
    ctx = RequestContext(
        feature_flags=FeatureFlags(enable_hub_resolver=True),
        resolver_config={CONFIG_KIND: "task"},
    )
    with pytest.raises(MissingDefaultError, match="catalog"):
        resolve_params(ctx, make_params(name="git-clone", version="0.9"))


def test_resolve_params_missing_default_kind():
    ctx = RequestContext(
        feature_flags=FeatureFlags(enable_hub_resolver=True),
        resolver_config={CONFIG_CATALOG: "Tekton"},
    )
    with pytest.raises(MissingDefaultError, match="kind"):
        resolve_params(ctx, make_params(name="git-clone", version="0.9"))


def test_resolve_params_invalid_default_kind():
    ctx = RequestContext(
        feature_flags=FeatureFlags(enable_hub_resolver=True),
        resolver_config={CONFIG_CATALOG: "Tekton", CONFIG_KIND: "bundle"},
    )
    with pytest.raises(InvalidParameterError):
        resolve_params(ctx, make_params(name="git-clone", version="0.9"))


def test_resolve_params_does_not_mutate_request(enabled_ctx):
    params = make_params(name="git-clone", version="0.9")
    resolve_params(enabled_ctx, params)
    assert [p.name for p in params] == ["name", "version"]
    assert dict(enabled_ctx.resolver_config) == {CONFIG_CATALOG: "Tekton", CONFIG_KIND: "task"}


def test_resolve_params_fails_when_disabled(disabled_ctx):
    with pytest.raises(ConfigurationError):
        resolve_params(
            disabled_ctx,
            make_params(name="git-clone", version="0.9", kind="task", catalog="Tekton"),
        )


@pytest.mark.parametrize(
    "values",
    [
        {"name": "", "version": "0.9"},
        {"name": "git-clone", "version": ""},
        {"name": "git-clone", "version": "0.9", "catalog": ""},
    ],
)
def test_resolve_params_rejects_empty_values(enabled_ctx, values):
    with pytest.raises(MissingParameterError, match="must not be empty"):
        resolve_params(enabled_ctx, make_params(**values))


def test_validate_allows_empty_values_as_supplied(enabled_ctx):
    """Validation only checks presence; emptiness is caught when resolving"""
    validate_params(enabled_ctx, make_params(name="", version="0.9"))
