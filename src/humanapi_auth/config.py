"""
Strategy configuration.

HumanApiConfig is immutable; the authorization URL, token URL and scope separator
fall back to the HumanAPI defaults when missing or empty. Options can be given
directly, as a mapping of camelCase option names (clientID, callbackURL, ...),
or read from HUMANAPI_* environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union
from urllib.parse import unquote

from humanapi_auth.errors import ConfigurationError

AUTHORIZATION_URL = "https://user.humanapi.co/oauth/authorize"
TOKEN_URL = "https://user.humanapi.co/oauth/token"
SCOPE_SEPARATOR = "%20"

# camelCase option name -> HumanApiConfig field
_OPTION_FIELDS = {
    "clientID": "client_id",
    "clientSecret": "client_secret",
    "callbackURL": "callback_url",
    "scope": "scope",
    "scopeSeparator": "scope_separator",
    "authorizationURL": "authorization_url",
    "tokenURL": "token_url",
    "skipUserProfile": "skip_user_profile",
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class HumanApiConfig:
    client_id: str
    client_secret: str
    callback_url: Optional[str] = None
    scope: Union[str, Sequence[str], None] = None
    scope_separator: str = SCOPE_SEPARATOR
    authorization_url: str = AUTHORIZATION_URL
    token_url: str = TOKEN_URL
    skip_user_profile: bool = False

    def __post_init__(self):
        # Empty values fall back to the defaults, same as missing ones
        if not self.authorization_url:
            object.__setattr__(self, "authorization_url", AUTHORIZATION_URL)
        if not self.token_url:
            object.__setattr__(self, "token_url", TOKEN_URL)
        if not self.scope_separator:
            object.__setattr__(self, "scope_separator", SCOPE_SEPARATOR)
        if self.scope is not None and not isinstance(self.scope, str):
            object.__setattr__(self, "scope", tuple(self.scope))

    def scope_string(self) -> Optional[str]:
        """
        Render the requested scope for the authorization request.

        A string is passed through unchanged. A sequence is joined with the scope
        separator, URL-decoded first since Authlib encodes the query itself.
        """
        if self.scope is None:
            return None
        if isinstance(self.scope, str):
            return self.scope
        return unquote(self.scope_separator).join(self.scope)

    @classmethod
    def from_options(cls, options: Mapping) -> "HumanApiConfig":
        """Build a config from camelCase options (clientID, clientSecret, callbackURL, ...)."""
        kwargs = {}
        for key, value in options.items():
            field_name = _OPTION_FIELDS.get(key, key)
            if field_name not in cls.__dataclass_fields__:
                raise ConfigurationError(f"Unknown option: {key}")
            kwargs[field_name] = value
        missing = [name for name in ("client_id", "client_secret") if not kwargs.get(name)]
        if missing:
            raise ConfigurationError(f"Missing required options: {', '.join(missing)}")
        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HumanApiConfig":
        """Read HUMANAPI_* variables (defaults to os.environ)."""
        env = os.environ if environ is None else environ
        client_id = env.get("HUMANAPI_CLIENT_ID")
        client_secret = env.get("HUMANAPI_CLIENT_SECRET")
        if not client_id or not client_secret:
            raise ConfigurationError("HUMANAPI_CLIENT_ID and HUMANAPI_CLIENT_SECRET must be set")
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            callback_url=env.get("HUMANAPI_CALLBACK_URL") or None,
            scope=env.get("HUMANAPI_SCOPE") or None,
            scope_separator=env.get("HUMANAPI_SCOPE_SEPARATOR", ""),
            authorization_url=env.get("HUMANAPI_AUTHORIZATION_URL", ""),
            token_url=env.get("HUMANAPI_TOKEN_URL", ""),
            skip_user_profile=env.get("HUMANAPI_SKIP_USER_PROFILE", "").lower() in _TRUTHY,
        )
