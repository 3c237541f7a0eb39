"""NextJsAppRunnerStack — App Runner + CloudFront (+ Route 53).

Resources are declared in dependency order:
  1. AppRunnerResources  (image, roles, service)      -> service URL
  2. CloudFrontResources (origin = service URL)       -> distribution
  3. Route53Resources    (custom domain only)         -> apex + www aliases
"""

from typing import Optional

from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_route53 as route53
from constructs import Construct

from stacks.app_runner import AppRunnerResources
from stacks.cloudfront import CloudFrontResources
from stacks.config import (
    DEFAULT_LOG_LEVEL,
    EDGE_REGION,
    ConfigurationError,
    require_domain_pair,
)
from stacks.dns import Route53Resources


class NextJsAppRunnerStack(Stack):
    """Next.js on App Runner behind CloudFront."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        domain_name: Optional[str] = None,
        hosted_zone_id: Optional[str] = None,
        log_level: str = DEFAULT_LOG_LEVEL,
        **kwargs,
    ) -> None:
        # Checked before the Stack exists so a bad config declares nothing
        custom_domain = require_domain_pair(domain_name, hosted_zone_id)
        env = kwargs.get("env")
        region = env.region if env is not None else None
        if custom_domain and region is not None and region != EDGE_REGION:
            raise ConfigurationError(
                f"A custom domain requires region {EDGE_REGION}, got {region!r}"
            )
        super().__init__(scope, construct_id, **kwargs)

        self.domain_name = domain_name if custom_domain else None

        # ── Compute ─────────────────────────────────────────────────
        self.app_runner = AppRunnerResources(
            self,
            "AppRunnerResources",
            environment={"LOG_LEVEL": log_level},
        )

        # ── Hosted zone (existing, imported by ID) ──────────────────
        hosted_zone = None
        if custom_domain:
            hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
                self,
                "HostedZone",
                zone_name=domain_name,
                hosted_zone_id=hosted_zone_id,
            )

        # ── CDN ─────────────────────────────────────────────────────
        self.cloudfront = CloudFrontResources(
            self,
            "CloudFrontResources",
            app_runner_service_url=self.app_runner.service_url,
            domain_name=self.domain_name,
            hosted_zone=hosted_zone,
        )
        self.distribution = self.cloudfront.distribution

        # ── DNS ─────────────────────────────────────────────────────
        self.route53 = None
        if custom_domain:
            self.route53 = Route53Resources(
                self,
                "Route53Resources",
                domain_name=domain_name,
                hosted_zone=hosted_zone,
                distribution=self.distribution,
            )

        # ── Outputs ─────────────────────────────────────────────────
        CfnOutput(
            self,
            "AppRunnerServiceUrl",
            value=self.app_runner.service_url,
            description="App Runner service hostname (CloudFront origin)",
        )
        CfnOutput(
            self,
            "CloudfrontURL",
            value=self.distribution.distribution_domain_name,
            description="CloudFront distribution domain name",
        )
        CfnOutput(
            self,
            "DistributionId",
            value=self.distribution.distribution_id,
            description="CloudFront distribution ID (needed for cache invalidation)",
        )
        if custom_domain:
            CfnOutput(
                self,
                "WebsiteURL",
                value=f"https://{domain_name}",
                description="Public website URL",
            )
