from aws_lambda_powertools import Logger, Metrics

from content_api import settings

# Logging
logger = Logger(service=settings.app_name, utc=True)
# Metrics
metrics = Metrics(namespace=settings.metrics_namespace, service=settings.app_name)
metrics.set_default_dimensions(environment=settings.stage)
