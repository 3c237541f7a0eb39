"""Shared fixtures for the CDK stack tests."""

import aws_cdk as cdk
import pytest
from aws_cdk import assertions

from stacks import config
from stacks.deployment_stack import NextJsAppRunnerStack
from tests.helpers import DOMAIN_NAME, ENV, HOSTED_ZONE_ID

CONFIG_VARIABLES = (
    "CDK_DEFAULT_ACCOUNT",
    "CDK_DEFAULT_REGION",
    "LOG_LEVEL",
    "DOMAIN_NAME",
    "HOSTED_ZONE_ID",
    "STACK_NAME",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep the developer's shell and .env out of the tests."""
    # setenv first so teardown also removes values injected by load_dotenv
    for name in CONFIG_VARIABLES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config, "PROJECT_ROOT", tmp_path)


@pytest.fixture
def plain_stack():
    app = cdk.App()
    return NextJsAppRunnerStack(app, "TestStack", env=ENV)


@pytest.fixture
def plain_template(plain_stack):
    return assertions.Template.from_stack(plain_stack)


@pytest.fixture
def domain_stack():
    app = cdk.App()
    return NextJsAppRunnerStack(
        app,
        "TestDomainStack",
        domain_name=DOMAIN_NAME,
        hosted_zone_id=HOSTED_ZONE_ID,
        log_level="DEBUG",
        env=ENV,
    )


@pytest.fixture
def domain_template(domain_stack):
    return assertions.Template.from_stack(domain_stack)
