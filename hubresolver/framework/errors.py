"""
Resolution Errors

Every failure a resolver reports to its host. Errors are raised where they
are detected and propagate unchanged; underlying causes are chained.
"""

from typing import Optional


class ResolutionError(Exception):
    """Base class for all resolution failures"""


class ConfigurationError(ResolutionError):
    """The resolver is disabled by its feature flag"""


class MissingParameterError(ResolutionError):
    """A required request parameter was not supplied"""


class InvalidParameterError(ResolutionError):
    """A request parameter has a value outside its allowed set"""


class MissingDefaultError(ResolutionError):
    """A parameter was omitted and the installation has no default for it"""


class FetchError(ResolutionError):
    """The hub could not be reached or the response could not be read"""


class NotFoundError(ResolutionError):
    """The hub answered with a non-success status"""

    def __init__(self, url: str, status_code: Optional[int] = None):
        super().__init__(f"requested resource '{url}' not found on hub")
        self.url = url
        self.status_code = status_code


class DecodeError(ResolutionError):
    """The hub response body is not the expected JSON envelope"""
