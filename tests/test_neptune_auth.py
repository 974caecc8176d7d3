"""
Tests for the SigV4 Bolt auth token.
"""

import json
from unittest.mock import Mock, patch

from botocore.credentials import Credentials
from neo4j.auth_management import ExpiringAuth

from database_adapters.neptune_auth import NeptuneAuthToken

URL = "https://demo-cluster.example.com:8182"

def make_token(token=None):
    provider = Mock(return_value=Credentials("AKIDEXAMPLE", "secretkey", token))
    return NeptuneAuthToken("us-east-1", URL, provider), provider

class TestSignedHeader:
    """Test the JSON credentials blob."""

    def test_fields(self):
        """The blob carries exactly the five signing fields."""
        token, _ = make_token()

        info = json.loads(token.get_signed_header())

        assert set(info) == {"Authorization", "HttpMethod", "X-Amz-Date", "Host", "X-Amz-Security-Token"}
        assert info["HttpMethod"] == "GET"
        assert info["Host"] == "demo-cluster.example.com:8182"
        assert info["X-Amz-Date"]
        assert info["X-Amz-Security-Token"] is None

    def test_authorization_scope(self):
        """The signature is scoped to neptune-db in the configured region."""
        token, _ = make_token()

        authorization = json.loads(token.get_signed_header())["Authorization"]

        assert authorization.startswith("AWS4-HMAC-SHA256 Credential=AKIDEXAMPLE/")
        assert "/us-east-1/neptune-db/aws4_request" in authorization
        assert "SignedHeaders=" in authorization
        assert "Signature=" in authorization

    def test_session_token_included(self):
        """Temporary credentials add the security token."""
        token, _ = make_token(token="session-token")

        info = json.loads(token.get_signed_header())

        assert info["X-Amz-Security-Token"] == "session-token"

    def test_credentials_resolved_per_signature(self):
        """Each signature resolves credentials again."""
        token, provider = make_token()

        token.get_signed_header()
        token.get_signed_header()

        assert provider.call_count == 2

class TestNeo4jAuth:
    """Test conversion to neo4j auth objects."""

    def test_to_auth(self):
        """The auth token uses basic scheme with a dummy principal."""
        token, _ = make_token()

        auth = token.to_auth()

        assert auth.scheme == "basic"
        assert auth.principal == "username"
        assert auth.realm == "realm"
        assert json.loads(auth.credentials)["HttpMethod"] == "GET"

    def test_url_property(self):
        """The URL is exposed unchanged."""
        token, _ = make_token()

        assert token.url == URL

    def test_expiring_auth(self):
        """Expiring auth wraps a signed token with an expiry."""
        token, _ = make_token()

        expiring = token._expiring_auth()

        assert isinstance(expiring, ExpiringAuth)
        assert expiring.auth.scheme == "basic"
        assert expiring.expires_at is not None

    @patch('database_adapters.neptune_auth.AuthManagers')
    def test_to_auth_manager(self, mock_managers):
        """The auth manager is built from the expiring-auth provider."""
        token, _ = make_token()

        manager = token.to_auth_manager()

        assert manager is mock_managers.bearer.return_value
        mock_managers.bearer.assert_called_once_with(token._expiring_auth)
