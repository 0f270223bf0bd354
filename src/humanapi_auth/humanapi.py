"""
HumanAPI Personal Health Data API OAuth strategy.

Uses Authlib for the OAuth 2.0 authorization-code handshake and fetches
/v1/human/profile with the access token to build a normalized Profile.
The profile request fails without the `profile` scope.
"""

import inspect
import json
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

import httpx
from authlib.integrations.starlette_client import OAuth

from humanapi_auth.config import HumanApiConfig
from humanapi_auth.errors import AuthenticationFailed, InternalOAuthError
from humanapi_auth.profile import PROVIDER, Profile
from humanapi_auth.protocol import AuthStrategy

logger = logging.getLogger(__name__)

PROFILE_URL = "https://api.humanapi.co/v1/human/profile"

# verify(access_token, refresh_token, profile) -> user; falsy user rejects the login
VerifyCallback = Callable[[str, Optional[str], Optional[Profile]], Union[Any, Awaitable[Any]]]


class HumanApiStrategy(AuthStrategy):
    """OAuth strategy for HumanAPI; the handshake is delegated to an Authlib client."""

    name: str = PROVIDER

    def __init__(
        self,
        config: Union[HumanApiConfig, Mapping],
        verify: VerifyCallback,
        oauth: Optional[OAuth] = None,
    ):
        """Fill in endpoint defaults and register an Authlib client under the strategy name."""
        if not callable(verify):
            raise TypeError("HumanApiStrategy requires a verify callback")
        if not isinstance(config, HumanApiConfig):
            config = HumanApiConfig.from_options(config)
        self.name = PROVIDER
        self.config = config
        self.callback_url = config.callback_url
        self.verify = verify

        client_kwargs = {}
        scope = config.scope_string()
        if scope:
            client_kwargs["scope"] = scope

        # Credentials go in the token request body, not a Basic auth header
        client_kwargs["token_endpoint_auth_method"] = "client_secret_post"

        # One client per strategy; Authlib caches clients by name per registry
        if oauth is not None and self.name in oauth._registry:
            raise ValueError(f"OAuth registry already has a '{self.name}' client")
        self.oauth = oauth if oauth is not None else OAuth()
        self.client = self.oauth.register(
            name=self.name,
            client_id=config.client_id,
            client_secret=config.client_secret,
            authorize_url=config.authorization_url,
            access_token_url=config.token_url,
            client_kwargs=client_kwargs,
        )

    async def login_redirect(self, request, redirect_uri: Optional[str] = None):
        """Return RedirectResponse to the HumanAPI authorization page."""
        return await self.client.authorize_redirect(request, redirect_uri or self.callback_url)

    async def user_profile(self, access_token: str) -> Profile:
        """
        GET the HumanAPI profile with access_token as bearer token.

        Transport failures and non-2xx responses raise InternalOAuthError chained
        from the httpx error; redirects are followed first. A body that is not
        JSON raises json.JSONDecodeError.
        """
        token = {"access_token": access_token, "token_type": "bearer"}
        try:
            resp = await self.client.get(PROFILE_URL, token=token, follow_redirects=True)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"HumanAPI profile fetch failed: {e}")
            raise InternalOAuthError("failed to fetch user profiles", e) from e

        body = resp.text
        data = json.loads(body)
        profile = Profile.parse(body, data)
        logger.debug(f"Fetched HumanAPI profile for user {profile.id}")
        return profile

    async def handle_callback(self, request) -> tuple[Any, Optional[Profile]]:
        """Exchange code for token, fetch the profile and run verify. Return (user, profile)."""
        token = await self.client.authorize_access_token(request)

        profile = None
        if not self.config.skip_user_profile:
            profile = await self.user_profile(token["access_token"])

        user = self.verify(token["access_token"], token.get("refresh_token"), profile)
        if inspect.isawaitable(user):
            user = await user
        if not user:
            logger.info("HumanAPI login rejected by verify callback")
            raise AuthenticationFailed("User rejected by verify callback")
        return user, profile
