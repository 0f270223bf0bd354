"""
Errors raised by the HumanAPI strategy.

Transport failures while fetching the profile are wrapped in InternalOAuthError;
JSON parse failures are not wrapped and surface as json.JSONDecodeError.
Handshake failures come straight from Authlib (authlib OAuthError).
"""

from typing import Optional


class HumanApiAuthError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(HumanApiAuthError):
    """Required strategy options are missing."""


class InternalOAuthError(HumanApiAuthError):
    """A request to the provider failed; oauth_error holds the transport error."""

    def __init__(self, message: str, oauth_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.oauth_error = oauth_error

    def __str__(self) -> str:
        if self.oauth_error is None:
            return self.message
        return f"{self.message}: {self.oauth_error}"


class AuthenticationFailed(HumanApiAuthError):
    """The verify callback did not accept the credentials."""
