"""Route53Resources — apex and www alias records for the distribution.

The hosted zone is not managed here; it is imported by ID in the
deployment stack and must already own DNS for the domain.
"""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class Route53Resources(Construct):
    """Alias A records pointing ``<domain>`` and ``www.<domain>`` at CloudFront."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        domain_name: str,
        hosted_zone: route53.IHostedZone,
        distribution: cloudfront.IDistribution,
    ) -> None:
        super().__init__(scope, construct_id)

        self.apex_record = route53.ARecord(
            self,
            "AliasRecord",
            zone=hosted_zone,
            target=route53.RecordTarget.from_alias(
                targets.CloudFrontTarget(distribution),
            ),
            record_name=f"{domain_name}.",
        )
        self.www_record = route53.ARecord(
            self,
            "WWWAliasRecord",
            zone=hosted_zone,
            target=route53.RecordTarget.from_alias(
                targets.CloudFrontTarget(distribution),
            ),
            record_name=f"www.{domain_name}.",
        )
