"""
Hub Resolver - Remote Task/Pipeline Resolution

Resolves task and pipeline definitions from a remote hub for a pipeline
orchestration host.
- framework: the contract the host invokes, request types and errors
- hub: parameter resolution, fetch and decode
- coreutils: environment, logging and HTTP session helpers
"""

__version__ = "0.1.0"
