"""
Infrastructure adapter: AWS Secrets Manager -> ISecretStore.

load_into_env() is called once at startup, before Settings.from_env(), when
TIINGO_SECRET_ARN is set. That lets a deployment keep TIINGO_API_KEY out of
the instance's .env file.
"""

import json
import logging
import os

import boto3

from src.domain.errors import ConfigurationError
from src.domain.ports.secret_store_port import ISecretStore

logger = logging.getLogger("market_service.secrets")


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes JSON secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None, client=None) -> None:
        self._client = client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a JSON secret by id or ARN."""
        response = self._client.get_secret_value(SecretId=secret_id)
        try:
            secret = json.loads(response["SecretString"])
        except (KeyError, ValueError) as exc:
            raise ConfigurationError(f"Secret {secret_id} is not a JSON object.") from exc
        if not isinstance(secret, dict):
            raise ConfigurationError(f"Secret {secret_id} is not a JSON object.")
        return secret

    def load_into_env(self, secret_id: str, overwrite: bool = False) -> list[str]:
        """Inject the key-value pairs of a JSON secret into os.environ.

        Variables already present in the environment win unless *overwrite*
        is set, so a local override keeps working.
        """
        loaded: list[str] = []
        for key, value in self.get_secret(secret_id).items():
            if not overwrite and os.environ.get(key):
                continue
            os.environ[key] = str(value)
            loaded.append(key)
        logger.info("Loaded %d variable(s) from secret store: %s", len(loaded), ", ".join(loaded))
        return loaded
