"""Deployment configuration — CDK context, environment and ``.env``.

Values are looked up in this order:
  1. CDK context (``cdk.json`` or ``cdk deploy -c key=value``)
  2. Process environment
  3. ``.env`` at the project root (loaded without overriding 1 or 2)

Domain name and hosted zone ID are optional, but must be set together.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import aws_cdk as cdk
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent

EDGE_REGION = "us-east-1"
DEFAULT_REGION = EDGE_REGION
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_STACK_NAME = "NextJSAppRunnerDeployment"

# context key -> environment variable
_KEYS = {
    "account": "CDK_DEFAULT_ACCOUNT",
    "region": "CDK_DEFAULT_REGION",
    "log_level": "LOG_LEVEL",
    "domain_name": "DOMAIN_NAME",
    "hosted_zone_id": "HOSTED_ZONE_ID",
    "stack_name": "STACK_NAME",
}


class ConfigurationError(ValueError):
    """Raised when the deployment configuration is incomplete or invalid."""


def require_domain_pair(
    domain_name: Optional[str],
    hosted_zone_id: Optional[str],
) -> bool:
    """Return True if a custom domain is configured.

    ``None`` for both means "no custom domain".  Once either value is
    supplied, both must be non-empty.
    """
    if domain_name is None and hosted_zone_id is None:
        return False
    if not domain_name:
        raise ConfigurationError(
            "domain_name is required when hosted_zone_id is set"
        )
    if not hosted_zone_id:
        raise ConfigurationError(
            "hosted_zone_id is required when domain_name is set"
        )
    return True


@dataclass(frozen=True)
class DeploymentConfig:
    """Settings fixed at synthesis time."""

    account: Optional[str] = None
    region: str = DEFAULT_REGION
    log_level: str = DEFAULT_LOG_LEVEL
    domain_name: Optional[str] = None
    hosted_zone_id: Optional[str] = None
    stack_name: str = DEFAULT_STACK_NAME

    @property
    def custom_domain(self) -> bool:
        return self.domain_name is not None

    @property
    def env(self) -> cdk.Environment:
        return cdk.Environment(account=self.account, region=self.region)

    def validate(self) -> "DeploymentConfig":
        require_domain_pair(self.domain_name, self.hosted_zone_id)
        # ACM certificates for CloudFront and Lambda@Edge only work in us-east-1
        if self.custom_domain and self.region != EDGE_REGION:
            raise ConfigurationError(
                f"A custom domain requires region {EDGE_REGION}, got {self.region!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")
        return self


def _lookup(app: cdk.App, key: str) -> Optional[str]:
    value = app.node.try_get_context(key)
    if value is None:
        value = os.environ.get(_KEYS[key])
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def load_config(app: cdk.App, dotenv_path: Optional[Path] = None) -> DeploymentConfig:
    """Build and validate a DeploymentConfig for ``app``."""
    load_dotenv(dotenv_path=dotenv_path or PROJECT_ROOT / ".env", override=False)

    config = DeploymentConfig(
        account=_lookup(app, "account"),
        region=_lookup(app, "region") or DEFAULT_REGION,
        log_level=(_lookup(app, "log_level") or DEFAULT_LOG_LEVEL).upper(),
        domain_name=_lookup(app, "domain_name"),
        hosted_zone_id=_lookup(app, "hosted_zone_id"),
        stack_name=_lookup(app, "stack_name") or DEFAULT_STACK_NAME,
    )
    return config.validate()
