"""Tests for the CDK entry point."""

import aws_cdk as cdk
import pytest
from aws_cdk import assertions

from app import build_app
from stacks.config import ConfigurationError


def test_builds_stack_from_context():
    app = cdk.App(
        context={
            "stack_name": "SiteStack",
            "account": "123456789012",
            "domain_name": "example.com",
            "hosted_zone_id": "Z123",
        }
    )

    stack = build_app(app)
    template = assertions.Template.from_stack(stack)

    assert stack.stack_name == "SiteStack"
    assert stack.region == "us-east-1"
    assert stack.account == "123456789012"
    template.resource_count_is("AWS::Route53::RecordSet", 2)
    template.has_output("WebsiteURL", {"Value": "https://example.com"})


def test_builds_plain_stack_by_default():
    app = cdk.App(context={"account": "123456789012"})

    stack = build_app(app)

    assert stack.stack_name == "NextJSAppRunnerDeployment"
    assertions.Template.from_stack(stack).resource_count_is("AWS::Route53::RecordSet", 0)


def test_incomplete_domain_config_aborts(monkeypatch):
    monkeypatch.setenv("DOMAIN_NAME", "example.com")
    app = cdk.App()

    with pytest.raises(ConfigurationError):
        build_app(app)

    assert app.node.children == []


def test_reads_project_dotenv(tmp_path):
    (tmp_path / ".env").write_text("DOMAIN_NAME=example.com\nHOSTED_ZONE_ID=Z123\n")
    app = cdk.App(context={"account": "123456789012"})

    stack = build_app(app)

    assertions.Template.from_stack(stack).resource_count_is("AWS::Route53::RecordSet", 2)


def test_dotenv_values_do_not_outlive_a_test():
    app = cdk.App(context={"account": "123456789012"})

    stack = build_app(app)

    assert stack.domain_name is None


def test_incomplete_project_dotenv_aborts(tmp_path):
    (tmp_path / ".env").write_text("DOMAIN_NAME=example.com\n")
    app = cdk.App()

    with pytest.raises(ConfigurationError, match="hosted_zone_id"):
        build_app(app)


def test_custom_domain_region_mismatch_aborts():
    app = cdk.App(
        context={
            "region": "eu-west-1",
            "domain_name": "example.com",
            "hosted_zone_id": "Z123",
        }
    )

    with pytest.raises(ConfigurationError, match="us-east-1"):
        build_app(app)

    assert app.node.children == []
