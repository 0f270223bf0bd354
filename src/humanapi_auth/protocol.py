"""
Protocol for authentication strategies used by the auth router.

Implementations (e.g. HumanApiStrategy) must support redirecting to the provider,
handling the callback to return the verified user, and fetching the user profile.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuthStrategy(Protocol):
    """Protocol for an OAuth 2.0 authentication strategy (e.g. HumanAPI)."""

    name: str
    callback_url: Optional[str]

    async def login_redirect(self, request, redirect_uri: Optional[str] = None):
        """Redirect the user to the provider's authorization page."""
        ...

    async def handle_callback(self, request) -> tuple[Any, Any]:
        """Handle the OAuth callback: exchange code for token, return (user, profile)."""
        ...

    async def user_profile(self, access_token: str) -> Any:
        """Fetch the provider profile for access_token and return it normalized."""
        ...
