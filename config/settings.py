"""
Centralized configuration management for the Neptune OpenCypher demo.
Resolves connection settings from environment variables, a properties file,
and defaults, in that order of precedence.
"""

import os
import logging
from dataclasses import dataclass
from typing import Dict, Optional

import boto3
from botocore.credentials import Credentials
from dotenv import load_dotenv, dotenv_values

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

class Settings:
    """Application settings and configuration."""

    # Properties file with neptune.* / aws.* keys, NEPTUNE_PROPERTIES_FILE overrides it
    PROPERTIES_FILE: str = "application.properties"

    # Neptune defaults
    DEFAULT_PORT: str = "8182"
    DEFAULT_REGION: str = "us-east-1"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(message)s'
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

# Global settings instance
settings = Settings()


def load_properties(path: Optional[str] = None) -> Dict[str, Optional[str]]:
    """
    Load key=value pairs from a properties file.

    Args:
        path: Path to the file, defaults to NEPTUNE_PROPERTIES_FILE or settings.PROPERTIES_FILE

    Returns:
        Mapping of property keys to values, empty if the file can't be read
    """
    path = path or os.getenv("NEPTUNE_PROPERTIES_FILE", settings.PROPERTIES_FILE)
    if not os.path.isfile(path):
        logger.debug(f"Properties file not found: {path}")
        return {}

    try:
        # Values are taken literally, ${VAR} is not expanded
        return dict(dotenv_values(path, interpolate=False))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read properties file {path}: {e}")
        return {}


def get_config_value(properties: Dict[str, Optional[str]], property_key: str, env_key: str,
                     default: Optional[str] = None) -> Optional[str]:
    """Resolve one setting: environment first, then properties file, then default."""
    env_value = os.getenv(env_key)
    if env_value is not None and env_value.strip():
        return env_value.strip()

    prop_value = properties.get(property_key)
    if prop_value is not None and prop_value.strip():
        return prop_value.strip()

    return default


def parse_bool(value: Optional[str]) -> bool:
    """Only a case-insensitive 'true' is true."""
    return value is not None and value.strip().lower() == "true"


@dataclass(frozen=True, repr=False)
class NeptuneConfig:
    """Connection settings for a Neptune cluster."""

    host: Optional[str]
    port: str = settings.DEFAULT_PORT
    region: str = settings.DEFAULT_REGION
    iam_auth: bool = False
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    session_token: Optional[str] = None

    @classmethod
    def from_properties(cls, path: Optional[str] = None) -> "NeptuneConfig":
        """Build a config from the environment, the properties file and defaults."""
        properties = load_properties(path)

        return cls(
            host=get_config_value(properties, "neptune.endpoint", "NEPTUNE_ENDPOINT"),
            port=get_config_value(properties, "neptune.port", "NEPTUNE_PORT", settings.DEFAULT_PORT),
            region=get_config_value(properties, "aws.region", "AWS_REGION", settings.DEFAULT_REGION),
            iam_auth=parse_bool(get_config_value(properties, "neptune.iam.auth", "NEPTUNE_IAM_AUTH", "false")),
            access_key=get_config_value(properties, "aws.access.key", "AWS_ACCESS_KEY_ID"),
            secret_key=get_config_value(properties, "aws.secret.key", "AWS_SECRET_ACCESS_KEY"),
            session_token=get_config_value(properties, "aws.session.token", "AWS_SESSION_TOKEN"),
        )

    def validate(self) -> None:
        """Validate that the settings needed to connect are present."""
        required_settings = [
            ("NEPTUNE_ENDPOINT", self.host),
            ("NEPTUNE_PORT", self.port),
        ]

        missing_settings = [name for name, value in required_settings if not value]
        if missing_settings:
            raise ValueError(f"Missing required configuration: {', '.join(missing_settings)}")

        if not str(self.port).isdigit():
            raise ValueError(f"Invalid Neptune port: {self.port}")

    @property
    def bolt_uri(self) -> str:
        return f"bolt://{self.host}:{self.port}"

    @property
    def https_uri(self) -> str:
        return f"https://{self.host}:{self.port}"

    @property
    def data_api_endpoint(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def has_static_credentials(self) -> bool:
        return bool(self.access_key and self.secret_key)

    def get_credentials(self):
        """
        Resolve AWS credentials for signing.

        Static keys (with the session token when one is set) win over the
        default provider chain.

        Returns:
            botocore credentials exposing access_key, secret_key and token

        Raises:
            ValueError: if the default chain finds no credentials
        """
        if self.has_static_credentials:
            if self.session_token:
                logger.debug("Using static session credentials")
            else:
                logger.debug("Using static long-term credentials")
            return Credentials(self.access_key, self.secret_key, self.session_token)

        logger.debug("Using default AWS credential provider chain")
        credentials = boto3.Session(region_name=self.region).get_credentials()
        if credentials is None:
            raise ValueError("AWS credentials not found. Configure credentials using AWS CLI or environment variables.")
        return credentials.get_frozen_credentials()

    def boto3_session(self) -> boto3.Session:
        """Create a boto3 session with the same credential selection as get_credentials()."""
        if self.has_static_credentials:
            return boto3.Session(
                aws_access_key_id=self.access_key,
                aws_secret_access_key=self.secret_key,
                aws_session_token=self.session_token,
                region_name=self.region,
            )
        return boto3.Session(region_name=self.region)

    def __repr__(self) -> str:
        # Keys stay out of logs
        return (f"NeptuneConfig(host={self.host!r}, port={self.port!r}, region={self.region!r}, "
                f"iam_auth={self.iam_auth})")
