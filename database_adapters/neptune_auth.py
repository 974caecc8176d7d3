"""
SigV4 authentication for Neptune Bolt connections.

Neptune with IAM auth enabled expects the Bolt "basic" auth token to carry,
as its credentials, a JSON document with the SigV4 headers of a signed
``GET /opencypher`` request. This module builds that token with botocore's
signer and hands it to the neo4j driver.

Typical usage:

    token = NeptuneAuthToken(config.region, config.https_uri, config.get_credentials)
    driver = GraphDatabase.driver(config.bolt_uri, auth=token.to_auth_manager())

Authentication only happens when the driver opens a pooled connection, so a
signature is produced per connection rather than per query.
"""

import json
import logging
from typing import Any, Callable, Dict
from urllib.parse import urlparse

from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from neo4j import Auth
from neo4j.auth_management import AuthManager, AuthManagers, ExpiringAuth

logger = logging.getLogger(__name__)

SCHEME = "basic"
REALM = "realm"
SERVICE_NAME = "neptune-db"
DUMMY_USERNAME = "username"
SIGNED_PATH = "/opencypher"

HTTP_METHOD_HDR = "HttpMethod"
AUTHORIZATION = "Authorization"
X_AMZ_DATE = "X-Amz-Date"
X_AMZ_SECURITY_TOKEN = "X-Amz-Security-Token"
HOST = "Host"

# SigV4 signatures are accepted for five minutes; re-sign a little earlier.
SIGNATURE_LIFETIME_SECONDS = 240


class NeptuneAuthToken:
    """Builds neo4j auth tokens signed with SigV4 for an IAM-enabled Neptune cluster."""

    def __init__(self, region: str, url: str, credentials_provider: Callable[[], Any]):
        """
        Args:
            region: AWS region used as the signing region
            url: HTTPS URL of the cluster, e.g. https://host:8182
            credentials_provider: callable returning botocore credentials,
                resolved again on every signature
        """
        self.region = region
        self._url = url
        self.credentials_provider = credentials_provider

    @property
    def url(self) -> str:
        return self._url

    def to_auth(self) -> Auth:
        """Return a freshly signed auth token."""
        return Auth(SCHEME, DUMMY_USERNAME, self.get_signed_header(), REALM)

    def to_auth_manager(self) -> AuthManager:
        """Return an auth manager that re-signs once the previous token gets old."""
        return AuthManagers.bearer(self._expiring_auth)

    def _expiring_auth(self) -> ExpiringAuth:
        logger.debug(f"Signing Neptune Bolt auth token for {self._url}")
        return ExpiringAuth(self.to_auth()).expires_in(SIGNATURE_LIFETIME_SECONDS)

    def get_signed_header(self) -> str:
        """Sign a GET request for the openCypher path and return its headers as JSON."""
        request = AWSRequest(method="GET", url=self._url.rstrip("/") + SIGNED_PATH)
        request.headers.add_header(HOST, urlparse(self._url).netloc)

        signer = SigV4Auth(self.credentials_provider(), SERVICE_NAME, self.region)
        signer.add_auth(request)

        return json.dumps(self._auth_info(request))

    @staticmethod
    def _auth_info(request: AWSRequest) -> Dict[str, Any]:
        return {
            AUTHORIZATION: request.headers.get(AUTHORIZATION),
            HTTP_METHOD_HDR: request.method,
            X_AMZ_DATE: request.headers.get(X_AMZ_DATE),
            HOST: request.headers.get(HOST),
            X_AMZ_SECURITY_TOKEN: request.headers.get(X_AMZ_SECURITY_TOKEN),
        }
