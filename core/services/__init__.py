"""Services for the core app.

Only model-free services are exported here because this package is imported
while Django is still loading apps. Import the model-backed services
(``user_service``, ``product_service`` and friends) from their modules.
"""

from core.services.database_monitor import DatabaseMonitor, database_monitor
from core.services.health_service import HealthService, health_service
from core.services.price_calculator import calc_prices
from core.services.review_aggregator import add_review, recompute_rating

__all__ = [
    "DatabaseMonitor",
    "HealthService",
    "add_review",
    "calc_prices",
    "database_monitor",
    "health_service",
    "recompute_rating",
]
