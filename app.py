#!/usr/bin/env python3
"""CDK entry point for the Next.js App Runner deployment.

Configuration comes from CDK context, the environment, or ``.env``
(see stacks/config.py).  Set both DOMAIN_NAME and HOSTED_ZONE_ID to
serve the site on a custom domain; leave both unset to use the
CloudFront domain only.
"""

import logging

import aws_cdk as cdk

from stacks.config import EDGE_REGION, load_config
from stacks.deployment_stack import NextJsAppRunnerStack

logger = logging.getLogger(__name__)


def build_app(app: cdk.App) -> NextJsAppRunnerStack:
    config = load_config(app)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if config.custom_domain:
        logger.info("Synthesizing %s for https://%s", config.stack_name, config.domain_name)
    else:
        logger.info("Synthesizing %s without a custom domain", config.stack_name)

    # Custom domains outside us-east-1 are rejected by load_config
    if config.region != EDGE_REGION:
        logger.warning("Region %s is not %s", config.region, EDGE_REGION)

    return NextJsAppRunnerStack(
        app,
        config.stack_name,
        domain_name=config.domain_name,
        hosted_zone_id=config.hosted_zone_id,
        log_level=config.log_level,
        env=config.env,
    )


if __name__ == "__main__":
    app = cdk.App()
    build_app(app)
    app.synth()
