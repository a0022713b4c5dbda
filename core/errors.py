"""Provider error types.

Per-item failures (``CredentialError``, ``TransientProviderError``) are absorbed
by the live metrics resolver. ``CatalogFetchError`` is never absorbed below the
route layer.
"""


class ProviderError(Exception):
    """Base class for upstream provider failures."""


class CredentialError(ProviderError):
    """The Twitch client-credentials exchange failed."""


class TransientProviderError(ProviderError):
    """A per-item Helix call failed (transport error or non-200 status)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CatalogFetchError(ProviderError):
    """The RAWG catalog list could not be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
