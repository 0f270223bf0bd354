"""
HumanAPI authentication strategy.

Exposes the strategy (HumanApiStrategy), its configuration and profile types,
the error classes, and the FastAPI auth router factory (create_auth_router).
"""

from .config import HumanApiConfig
from .errors import AuthenticationFailed, ConfigurationError, HumanApiAuthError, InternalOAuthError
from .humanapi import PROFILE_URL, HumanApiStrategy
from .profile import Profile
from .protocol import AuthStrategy
from .router import create_auth_router

__all__ = [
    "AuthStrategy",
    "HumanApiStrategy",
    "HumanApiConfig",
    "Profile",
    "PROFILE_URL",
    "HumanApiAuthError",
    "ConfigurationError",
    "InternalOAuthError",
    "AuthenticationFailed",
    "create_auth_router",
]
