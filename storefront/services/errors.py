"""
Error types raised by the service layer.

- InvalidRequestError: malformed top-level request; routes map it to 400.
- UpstreamFailure: the model-assisted path failed (network error, timeout,
  missing client, non-JSON or non-conforming text). Never leaves the
  resolver; it is converted into the keyword fallback.
"""


class InvalidRequestError(ValueError):
    """Raised when preferences or the catalog snapshot are missing or invalid."""


class UpstreamFailure(Exception):
    """Raised when the external model service cannot produce usable output."""
