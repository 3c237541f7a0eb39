"""Constants and template helpers shared by the stack tests."""

import aws_cdk as cdk

ENV = cdk.Environment(account="123456789012", region="us-east-1")
DOMAIN_NAME = "example.com"
HOSTED_ZONE_ID = "Z0123456789ABCDEFGHIJ"


def only_resource(template, resource_type):
    """Return (logical_id, resource) for the single resource of a type."""
    resources = template.find_resources(resource_type)
    assert len(resources) == 1, f"expected one {resource_type}, found {len(resources)}"
    return next(iter(resources.items()))


def distribution_config(template):
    _, distribution = only_resource(template, "AWS::CloudFront::Distribution")
    return distribution["Properties"]["DistributionConfig"]
