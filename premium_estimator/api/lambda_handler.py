# premium_estimator/api/lambda_handler.py
"""
AWS Lambda handler for the FastAPI app using Mangum (ASGI adapter).

How it works:
- API Gateway invokes Lambda
- Mangum translates the event into an ASGI request
- FastAPI handles routing (/health, /rates, /premium, /premium/form, /premium/batch)
- Response is returned back to API Gateway

Cold start:
- With CHECK_RATES=true (default) the rate tables are verified at import;
  a broken table fails the cold start instead of serving wrong premiums.
"""

from __future__ import annotations

import logging

from mangum import Mangum

from premium_estimator.api.app import app
from premium_estimator.pricing.rates import check_rate_tables, list_products
from premium_estimator.utils.config import configure_logging, get_settings

logger = logging.getLogger(__name__)

_settings = get_settings()
configure_logging(_settings.log_level)

if _settings.check_rates:
    check_rate_tables()
    logger.info("Rate tables verified for products: %s", list_products())


# Mangum handler
handler = Mangum(app, lifespan="off")
