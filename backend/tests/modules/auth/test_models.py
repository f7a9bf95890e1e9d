from modules.auth.models import JWTPayload


class TestJWTPayload:
    def test_parse_jwt_payload(self):
        """Should parse JWT payload from dict."""
        payload = JWTPayload(
            sub="user-123",
            email="test@example.com",
            exp=1704067200,
            iat=1704063600,
            aud="authenticated",
            role="authenticated",
        )
        assert payload.sub == "user-123"
        assert payload.email == "test@example.com"

    def test_jwt_defaults(self):
        """JWTPayload should have sensible defaults."""
        payload = JWTPayload(sub="user-123", exp=1704067200, iat=1704063600)
        assert payload.email is None
        assert payload.email_confirmed_at is None
        assert payload.aud == "authenticated"
        assert payload.role == "authenticated"
        assert payload.app_metadata == {}
        assert payload.user_metadata == {}

    def test_jwt_with_metadata(self):
        payload = JWTPayload(
            sub="user-123",
            exp=1704067200,
            iat=1704063600,
            app_metadata={"provider": "google"},
            user_metadata={"name": "Test User"},
        )
        assert payload.app_metadata == {"provider": "google"}
        assert payload.user_metadata == {"name": "Test User"}
