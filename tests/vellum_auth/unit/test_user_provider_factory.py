"""Unit tests for create_user_provider."""

import logging

import pytest

from tests.shared.fixtures.content_objects import MemberObject
from vellum import ContentObjectRegistry, UserObject
from vellum_auth import ConfigurationError, ObjectUserProvider, create_user_provider
from vellum_config import Settings


def make_settings(**overrides) -> Settings:
    values = {"postgres_password": "test"}
    values.update(overrides)
    return Settings(**values)


class TestCreateUserProvider:
    """Tests for building the provider from settings."""

    def test_default_settings(self, finder):
        """Defaults give a UserObject provider looked up by username."""
        provider = create_user_provider(finder, settings=make_settings())

        assert isinstance(provider, ObjectUserProvider)
        assert provider.entity_type is UserObject
        assert provider.username_field == "username"

    def test_configured_class_and_field(self, finder):
        """Class path and field come from the settings."""
        settings = make_settings(
            user_provider_class="tests.shared.fixtures.content_objects.MemberObject",
            user_provider_username_field="nickname",
        )

        provider = create_user_provider(finder, settings=settings)

        assert provider.entity_type is MemberObject
        assert provider.username_field == "nickname"

    def test_custom_registry(self, finder):
        registry = ContentObjectRegistry()
        registry.register(MemberObject, name="Member")

        provider = create_user_provider(
            finder,
            settings=make_settings(user_provider_class="Member"),
            registry=registry,
        )

        assert provider.entity_type is MemberObject

    def test_invalid_settings(self, finder):
        """Bad configuration surfaces as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            create_user_provider(
                finder,
                settings=make_settings(user_provider_username_field="nickname"),
            )

    def test_falls_back_to_environment(self, finder, monkeypatch):
        """Without explicit settings the cached environment settings are used."""
        monkeypatch.setenv("POSTGRES_PASSWORD", "test")
        monkeypatch.setenv("USER_PROVIDER_USERNAME_FIELD", "email")
        monkeypatch.setattr(
            "vellum_auth.factory.get_settings",
            lambda: Settings(),
        )

        provider = create_user_provider(finder)

        assert provider.username_field == "email"

    def test_logs_below_info(self, finder, caplog):
        """Building a provider per request stays out of INFO logs."""
        caplog.set_level(logging.DEBUG, logger="vellum_auth.factory")

        create_user_provider(finder, settings=make_settings())

        records = [r for r in caplog.records if r.name == "vellum_auth.factory"]
        assert records
        assert all(r.levelno == logging.DEBUG for r in records)
