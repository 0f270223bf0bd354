"""Tests for HumanApiConfig defaults and loading."""

import dataclasses

import pytest

from humanapi_auth import ConfigurationError, HumanApiConfig
from humanapi_auth.config import AUTHORIZATION_URL, SCOPE_SEPARATOR, TOKEN_URL


def test_defaults_filled_in():
    config = HumanApiConfig(client_id="id", client_secret="secret")
    assert config.authorization_url == "https://user.humanapi.co/oauth/authorize"
    assert config.token_url == "https://user.humanapi.co/oauth/token"
    assert config.scope_separator == "%20"
    assert config.callback_url is None
    assert config.skip_user_profile is False


def test_empty_values_fall_back_to_defaults():
    config = HumanApiConfig(
        client_id="id",
        client_secret="secret",
        authorization_url="",
        token_url="",
        scope_separator="",
    )
    assert config.authorization_url == AUTHORIZATION_URL
    assert config.token_url == TOKEN_URL
    assert config.scope_separator == SCOPE_SEPARATOR


def test_explicit_values_kept():
    config = HumanApiConfig(
        client_id="id",
        client_secret="secret",
        authorization_url="https://auth.example.com/authorize",
        token_url="https://auth.example.com/token",
        scope_separator=",",
    )
    assert config.authorization_url == "https://auth.example.com/authorize"
    assert config.token_url == "https://auth.example.com/token"
    assert config.scope_separator == ","


def test_config_is_immutable():
    config = HumanApiConfig(client_id="id", client_secret="secret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.token_url = "https://elsewhere.example.com/token"


class TestScopeString:
    def test_none(self):
        assert HumanApiConfig(client_id="id", client_secret="secret").scope_string() is None

    def test_string_passed_through(self):
        config = HumanApiConfig(client_id="id", client_secret="secret", scope="profile activity")
        assert config.scope_string() == "profile activity"

    def test_list_joined_with_decoded_default_separator(self):
        config = HumanApiConfig(client_id="id", client_secret="secret", scope=["profile", "activity"])
        assert config.scope_string() == "profile activity"

    def test_list_joined_with_custom_separator(self):
        config = HumanApiConfig(
            client_id="id", client_secret="secret", scope=["profile", "activity"], scope_separator=","
        )
        assert config.scope_string() == "profile,activity"


class TestFromOptions:
    def test_camel_case_options(self):
        config = HumanApiConfig.from_options(
            {
                "clientID": "id",
                "clientSecret": "secret",
                "callbackURL": "https://www.example.com/auth/humanapi/callback",
                "scope": "profile bloodpressure activity",
            }
        )
        assert config.client_id == "id"
        assert config.client_secret == "secret"
        assert config.callback_url == "https://www.example.com/auth/humanapi/callback"
        assert config.scope == "profile bloodpressure activity"
        assert config.authorization_url == AUTHORIZATION_URL

    def test_missing_client_secret(self):
        with pytest.raises(ConfigurationError, match="client_secret"):
            HumanApiConfig.from_options({"clientID": "id"})

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="Unknown option"):
            HumanApiConfig.from_options({"clientID": "id", "clientSecret": "secret", "profileURL": "x"})


class TestFromEnv:
    def test_reads_humanapi_variables(self):
        config = HumanApiConfig.from_env(
            {
                "HUMANAPI_CLIENT_ID": "id",
                "HUMANAPI_CLIENT_SECRET": "secret",
                "HUMANAPI_CALLBACK_URL": "https://app.example.com/cb",
                "HUMANAPI_SCOPE": "profile",
                "HUMANAPI_SKIP_USER_PROFILE": "true",
            }
        )
        assert config.client_id == "id"
        assert config.callback_url == "https://app.example.com/cb"
        assert config.scope == "profile"
        assert config.skip_user_profile is True
        assert config.authorization_url == AUTHORIZATION_URL
        assert config.token_url == TOKEN_URL
        assert config.scope_separator == SCOPE_SEPARATOR

    def test_missing_credentials(self):
        with pytest.raises(ConfigurationError):
            HumanApiConfig.from_env({"HUMANAPI_CLIENT_ID": "id"})
