"""
FastAPI app: HumanAPI OAuth login with the user kept in a signed session cookie.

Decisions:
- .env is loaded before importing humanapi_auth so HUMANAPI_* and SESSION_SECRET
  are available when the strategy is created (Ruff E402 suppressed for that).
- The verify callback accepts every HumanAPI user and keeps only the id and
  email; swap in a real user lookup for production.
- Session secret from SESSION_SECRET env; default "change-me" is for dev only.
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

load_dotenv()

# Load .env before humanapi_auth so HUMANAPI_* and SESSION_SECRET are set; Ruff E402.
from humanapi_auth import HumanApiConfig, HumanApiStrategy, create_auth_router  # noqa: E402

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")


async def verify(access_token, refresh_token, profile):
    """Accept any HumanAPI user; the session stores this dict."""
    if profile is None:
        return {"provider": "humanapi"}
    return {"provider": profile.provider, "id": profile.id, "email": profile.email}


strategy = HumanApiStrategy(HumanApiConfig.from_env(), verify)

app = FastAPI()
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)
app.include_router(create_auth_router(strategy))


@app.get("/")
async def home(request: Request):
    user = request.session.get("user")
    return {"logged_in": bool(user), "user": user}
