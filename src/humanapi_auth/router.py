"""
FastAPI auth router: login, callback, /me, logout.

Builds an APIRouter around an AuthStrategy. The verified user and the
normalized profile are kept in the Starlette session, so the app must install
SessionMiddleware. Users returned by the verify callback must be
JSON-serializable.
"""

import json
import logging
import time

from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from humanapi_auth.errors import AuthenticationFailed, InternalOAuthError
from humanapi_auth.protocol import AuthStrategy

logger = logging.getLogger(__name__)


def create_auth_router(strategy: AuthStrategy, success_url: str = "/me"):
    """Create an APIRouter with /auth/{name}, /auth/{name}/callback, /me, and /logout endpoints."""
    router = APIRouter()
    login_path = f"/auth/{strategy.name}"
    callback_name = f"{strategy.name}_callback"

    @router.get(login_path, name=f"{strategy.name}_login")
    async def login(request: Request):
        """Redirect the user to the provider's authorization page."""
        redirect_uri = strategy.callback_url or str(request.url_for(callback_name))
        return await strategy.login_redirect(request, redirect_uri)

    @router.get(f"{login_path}/callback", name=callback_name)
    async def auth_callback(request: Request):
        """Handle OAuth callback: exchange code, verify user, store it in the session, redirect."""
        try:
            user, profile = await strategy.handle_callback(request)
        except OAuthError as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        except AuthenticationFailed as e:
            return JSONResponse({"error": str(e)}, status_code=401)
        except (InternalOAuthError, json.JSONDecodeError) as e:
            logger.error(f"{strategy.name} callback failed: {e}")
            return JSONResponse({"error": str(e)}, status_code=502)

        request.session["user"] = user
        # Raw body left out to keep the session cookie small
        request.session["profile"] = profile.to_dict(include_raw=False) if profile is not None else None
        request.session["authenticated_at"] = int(time.time())
        return RedirectResponse(url=success_url)

    @router.get("/me")
    async def me(request: Request):
        """Return current user and profile; redirect to login if not authenticated."""
        if "user" not in request.session:
            return RedirectResponse(url=login_path)
        return {
            "user": request.session["user"],
            "profile": request.session.get("profile"),
            "authenticated_at": request.session.get("authenticated_at"),
        }

    @router.get("/logout")
    async def logout(request: Request):
        """Clear session and redirect to home."""
        request.session.clear()
        return RedirectResponse(url="/")

    return router
