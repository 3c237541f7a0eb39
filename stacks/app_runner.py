"""AppRunnerResources — container image, IAM roles and App Runner service.

Builds the Next.js image from ``resources/app`` as a CDK Docker asset
and runs it on App Runner.  Auto deployments are off: a new image is
only rolled out by a ``cdk deploy``.
"""

from typing import Dict, Optional

from aws_cdk import aws_apprunner as apprunner
from aws_cdk import aws_ecr_assets as ecr_assets
from aws_cdk import aws_iam as iam
from constructs import Construct

from stacks.config import PROJECT_ROOT

APP_DIRECTORY = PROJECT_ROOT / "resources" / "app"

_ECR_ACCESS_POLICY = "service-role/AWSAppRunnerServicePolicyForECRAccess"


class AppRunnerResources(Construct):
    """App Runner service serving the web app over HTTPS."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        directory: Optional[str] = None,
        port: str = "3000",
        cpu: str = "1 vCPU",
        memory: str = "2 GB",
        health_check_path: str = "/",
        environment: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(scope, construct_id)

        # ── IAM roles ───────────────────────────────────────────────
        # Instance role: assumed by the running containers
        self.instance_role = iam.Role(
            self,
            "AppRunnerInstanceRole",
            assumed_by=iam.ServicePrincipal("tasks.apprunner.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(_ECR_ACCESS_POLICY),
            ],
        )

        # Access role: used by App Runner to pull the image from ECR
        self.access_role = iam.Role(
            self,
            "AppRunnerAccessRole",
            assumed_by=iam.ServicePrincipal("build.apprunner.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(_ECR_ACCESS_POLICY),
            ],
        )

        # ── Docker image (tagged by asset hash) ─────────────────────
        self.image = ecr_assets.DockerImageAsset(
            self,
            "NextJSDockerImage",
            directory=directory or str(APP_DIRECTORY),
            platform=ecr_assets.Platform.LINUX_AMD64,
        )

        # ── App Runner service ──────────────────────────────────────
        self.service = apprunner.CfnService(
            self,
            "AppRunnerService",
            source_configuration=apprunner.CfnService.SourceConfigurationProperty(
                auto_deployments_enabled=False,
                authentication_configuration=apprunner.CfnService.AuthenticationConfigurationProperty(
                    access_role_arn=self.access_role.role_arn,
                ),
                image_repository=apprunner.CfnService.ImageRepositoryProperty(
                    image_identifier=self.image.image_uri,
                    image_repository_type="ECR",
                    image_configuration=apprunner.CfnService.ImageConfigurationProperty(
                        port=port,
                        runtime_environment_variables=[
                            apprunner.CfnService.KeyValuePairProperty(name=name, value=value)
                            for name, value in sorted((environment or {}).items())
                        ]
                        or None,
                    ),
                ),
            ),
            instance_configuration=apprunner.CfnService.InstanceConfigurationProperty(
                cpu=cpu,
                memory=memory,
                instance_role_arn=self.instance_role.role_arn,
            ),
            health_check_configuration=apprunner.CfnService.HealthCheckConfigurationProperty(
                path=health_check_path,
                protocol="HTTP",
            ),
        )

        # Hostname only (no scheme), e.g. abc123.us-east-1.awsapprunner.com
        self.service_url = self.service.attr_service_url
