"""Lambda@Edge request handler: forward the custom origin's domain as Host.

CloudFront forwards the viewer's Host header (the custom domain) by
default, which App Runner rejects.  Rewriting it to the origin domain
lets the request reach the service.
"""

import logging

# Lambda@Edge does not support environment variables
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def handler(event, context):
    request = event["Records"][0]["cf"]["request"]
    custom_origin = (request.get("origin") or {}).get("custom") or {}
    domain_name = custom_origin.get("domainName")

    if domain_name:
        logger.info("Rewriting Host header to %s", domain_name)
        request["headers"]["host"] = [{"key": "Host", "value": domain_name}]

    return request
