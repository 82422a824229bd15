"""
Main Entry Point - Resolve From the Command Line

Runs one resolution against a live hub, the way a host would, and writes the
fetched definition to stdout.
"""

import logging
import sys
from dataclasses import replace
from typing import List, Optional

from hubresolver.coreutils.logging import setup_logging
from hubresolver.framework import FeatureFlags, Param, RequestContext, ResolutionError
from hubresolver.hub import HubResolver

logger = logging.getLogger(__name__)


def build_context(
    config_path: Optional[str] = None,
    timeout: Optional[float] = None,
    enable: bool = False,
) -> RequestContext:
    """Context from the environment, optionally forcing the resolver on"""
    ctx = RequestContext.from_env(config_path=config_path, timeout=timeout)
    if enable:
        ctx = replace(ctx, feature_flags=FeatureFlags(enable_hub_resolver=True))
    return ctx


def run(
    command: str,
    params: List[Param],
    ctx: RequestContext,
    hub_url: Optional[str] = None,
) -> bytes:
    """
    Validate, and for "resolve" also fetch, one request

    Returns:
        bytes: The resolved content, empty for "validate"
    """
    resolver = HubResolver(hub_url=hub_url)
    resolver.initialize(ctx)

    resolver.validate_params(ctx, params)
    if command == "validate":
        logger.info("Parameters are valid")
        return b""

    return resolver.resolve(ctx, params).data()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Hub task/pipeline resolver")
    parser.add_argument(
        "command", choices=["resolve", "validate"], help="Command to run"
    )
    parser.add_argument(
        "--param",
        "-p",
        action="append",
        default=[],
        help="Request parameter as name=value (repeatable)",
    )
    parser.add_argument(
        "--config", help="Installation configuration file (key=value lines)"
    )
    parser.add_argument("--hub-url", help="URL template with four %%s slots")
    parser.add_argument(
        "--timeout", type=float, help="Per-read socket timeout in seconds"
    )
    parser.add_argument(
        "--enable",
        action="store_true",
        help="Enable the hub resolver regardless of ENABLE_HUB_RESOLVER",
    )
    parser.add_argument("--verbose", "-v", action="store_true")

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        params = [Param.parse(text) for text in args.param]
    except ValueError as e:
        parser.error(str(e))

    try:
        ctx = build_context(args.config, args.timeout, args.enable)
        content = run(args.command, params, ctx, args.hub_url)
    except (ResolutionError, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
