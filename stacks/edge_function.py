"""LambdaEdgeFunction — Host header rewrite running at CloudFront edges."""

from aws_cdk import Duration
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

from stacks.config import PROJECT_ROOT

HANDLER_DIRECTORY = PROJECT_ROOT / "resources" / "lambda_edge"


class LambdaEdgeFunction(Construct):
    """Python function whose published version is attached to CloudFront.

    Must live in us-east-1 and must not set environment variables.
    """

    def __init__(self, scope: Construct, construct_id: str) -> None:
        super().__init__(scope, construct_id)

        self.function = lambda_.Function(
            self,
            "LambdaEdgeFunction",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="index.handler",
            code=lambda_.Code.from_asset(
                str(HANDLER_DIRECTORY),
                exclude=["__pycache__", "*.pyc"],
            ),
            timeout=Duration.seconds(5),
            memory_size=128,
            description="Rewrites the Host header to the App Runner origin domain",
        )

    @property
    def current_version(self) -> lambda_.IVersion:
        return self.function.current_version
