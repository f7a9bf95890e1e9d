"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.database import (
    get_supabase_client,
    get_supabase_user_client,
    reset_client_cache,
)


class TestSupabaseClient:
    def setup_method(self):
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_creates_client_with_service_role_key(self, mock_settings, mock_create):
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "service-key"
        mock_create.return_value = MagicMock()

        client = get_supabase_client()

        mock_create.assert_called_once_with("https://test.supabase.co", "service-key")
        assert client is mock_create.return_value

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_caches_client(self, mock_settings, mock_create):
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "service-key"

        assert get_supabase_client() is get_supabase_client()
        mock_create.assert_called_once()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_reset_creates_new_client(self, mock_settings, mock_create):
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "service-key"
        mock_create.side_effect = [MagicMock(name="client1"), MagicMock(name="client2")]

        client1 = get_supabase_client()
        reset_client_cache()
        client2 = get_supabase_client()

        assert client1 is not client2

    @pytest.mark.parametrize("url,key", [("", ""), ("", "key"), ("https://test.supabase.co", "")])
    @patch("shared.database.get_settings")
    def test_raises_without_config(self, mock_settings, url, key):
        mock_settings.return_value.supabase_url = url
        mock_settings.return_value.supabase_service_role_key = key

        with pytest.raises(RuntimeError, match="configuration missing"):
            get_supabase_client()


class TestSupabaseUserClient:
    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_queries_carry_user_token(self, mock_settings, mock_create):
        """Table queries should run as the user so RLS applies."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_anon_key = "anon-key"
        mock_client = MagicMock()
        mock_create.return_value = mock_client

        client = get_supabase_user_client("user-access-token")

        mock_create.assert_called_once_with("https://test.supabase.co", "anon-key")
        mock_client.postgrest.auth.assert_called_once_with("user-access-token")
        assert client is mock_client

    @patch("shared.database.get_settings")
    def test_raises_without_config(self, mock_settings):
        mock_settings.return_value.supabase_url = ""
        mock_settings.return_value.supabase_anon_key = ""

        with pytest.raises(RuntimeError, match="configuration missing"):
            get_supabase_user_client("token")
