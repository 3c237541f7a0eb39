"""CloudFrontResources — distribution in front of the App Runner service.

The distribution:
  - redirects viewers to HTTPS
  - disables caching (every page is rendered by the server)
  - forwards only User-Agent and Referer, plus all query strings
  - with a custom domain, also gets an ACM certificate and the
    Host-rewrite Lambda@Edge on origin-request and viewer-request
"""

from typing import Optional

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_iam as iam
from aws_cdk import aws_route53 as route53
from constructs import Construct

from stacks.config import require_domain_pair
from stacks.edge_function import LambdaEdgeFunction

FORWARDED_HEADERS = ("User-Agent", "Referer")


class CloudFrontResources(Construct):
    """CDN distribution, origin-request policy and optional custom domain."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        app_runner_service_url: str,
        domain_name: Optional[str] = None,
        hosted_zone: Optional[route53.IHostedZone] = None,
    ) -> None:
        custom_domain = require_domain_pair(
            domain_name,
            None if hosted_zone is None else hosted_zone.hosted_zone_id,
        )
        super().__init__(scope, construct_id)

        self.certificate: Optional[acm.ICertificate] = None
        self.edge_function: Optional[LambdaEdgeFunction] = None

        # ── Origin: App Runner (HTTPS only) ─────────────────────────
        app_runner_origin = origins.HttpOrigin(
            app_runner_service_url,
            protocol_policy=cloudfront.OriginProtocolPolicy.HTTPS_ONLY,
            http_port=80,
            https_port=443,
        )

        # ── Origin request policy ───────────────────────────────────
        self.origin_request_policy = cloudfront.OriginRequestPolicy(
            self,
            "UserAgentRefererHeadersPolicy",
            header_behavior=cloudfront.OriginRequestHeaderBehavior.allow_list(
                *FORWARDED_HEADERS
            ),
            query_string_behavior=cloudfront.OriginRequestQueryStringBehavior.all(),
        )

        edge_lambdas = None
        domain_names = None
        if custom_domain:
            # ── ACM certificate (DNS-validated via Route 53) ────────
            # Distribution certificates must be in us-east-1
            self.certificate = acm.Certificate(
                self,
                "Certificate",
                domain_name=domain_name,
                subject_alternative_names=[f"*.{domain_name}"],
                validation=acm.CertificateValidation.from_dns(hosted_zone),
            )
            domain_names = [domain_name, f"www.{domain_name}"]

            # ── Lambda@Edge (Host header rewrite) ───────────────────
            self.edge_function = LambdaEdgeFunction(self, "LambdaEdgeFunction")
            version = self.edge_function.current_version
            version.add_permission(
                "InvokeLambdaPermission",
                principal=iam.ServicePrincipal("edgelambda.amazonaws.com"),
                action="lambda:InvokeFunction",
            )
            edge_lambdas = [
                cloudfront.EdgeLambda(
                    function_version=version,
                    event_type=cloudfront.LambdaEdgeEventType.ORIGIN_REQUEST,
                ),
                cloudfront.EdgeLambda(
                    function_version=version,
                    event_type=cloudfront.LambdaEdgeEventType.VIEWER_REQUEST,
                ),
            ]

        # ── Distribution ────────────────────────────────────────────
        self.distribution = cloudfront.Distribution(
            self,
            "CloudFrontDistribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=app_runner_origin,
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
                origin_request_policy=self.origin_request_policy,
                cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
                allowed_methods=cloudfront.AllowedMethods.ALLOW_ALL,
                edge_lambdas=edge_lambdas,
            ),
            domain_names=domain_names,
            certificate=self.certificate,
            http_version=cloudfront.HttpVersion.HTTP2,
        )
