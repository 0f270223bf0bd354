import httpx
import pytest

from humanapi_auth import PROFILE_URL, HumanApiConfig, HumanApiStrategy


def _profile_response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=body, request=httpx.Request("GET", PROFILE_URL))


@pytest.fixture
def profile_response():
    """Factory for the responses the Authlib client returns for the profile request."""
    return _profile_response


@pytest.fixture
def config():
    return HumanApiConfig(
        client_id="test-client",
        client_secret="test-secret",
        scope=["profile", "bloodpressure"],
    )


@pytest.fixture
def verified():
    """Collects the (access_token, refresh_token, profile) tuples seen by verify."""
    return []


@pytest.fixture
def strategy(config, verified):
    def verify(access_token, refresh_token, profile):
        verified.append((access_token, refresh_token, profile))
        return {"id": profile.id if profile else None}

    return HumanApiStrategy(config, verify)
