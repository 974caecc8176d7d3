"""
Shared fixtures for the Neptune demo tests.
"""

import pytest

from config.settings import NeptuneConfig

NEPTUNE_ENV_VARS = (
    "NEPTUNE_ENDPOINT",
    "NEPTUNE_PORT",
    "AWS_REGION",
    "NEPTUNE_IAM_AUTH",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "NEPTUNE_PROPERTIES_FILE",
)

TEST_HOST = "demo-cluster.cluster-abc123.us-east-1.neptune.amazonaws.com"

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's AWS/Neptune environment out of the tests."""
    for name in NEPTUNE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

@pytest.fixture
def config():
    """Config for a cluster without IAM auth."""
    return NeptuneConfig(host=TEST_HOST, port="8182", region="us-east-1", iam_auth=False)

@pytest.fixture
def iam_config():
    """Config for an IAM-enabled cluster with static keys."""
    return NeptuneConfig(
        host=TEST_HOST,
        port="8182",
        region="us-east-1",
        iam_auth=True,
        access_key="AKIDEXAMPLE",
        secret_key="wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
    )

@pytest.fixture
def properties_file(tmp_path):
    """Write an application.properties file and return its path."""
    path = tmp_path / "application.properties"
    path.write_text(
        "# Neptune connection\n"
        "neptune.endpoint=props-cluster.example.com\n"
        "neptune.port=8183\n"
        "aws.region=eu-west-1\n"
        "neptune.iam.auth=TRUE\n"
        "aws.access.key=AKIDPROPS\n"
        "aws.secret.key=secretprops\n"
    )
    return str(path)
