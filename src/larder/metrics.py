"""Prometheus metrics definitions for Larder."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "larder_http_requests_total",
    "Total number of HTTP requests processed by the Larder API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "larder_http_request_duration_seconds",
    "Latency of HTTP requests processed by the Larder API",
    ["method", "path"],
)

MEAL_PLANS_GENERATED = Counter(
    "larder_meal_plans_generated_total",
    "Number of meal plan entries produced by weekly generation",
)

SHOPPING_ITEMS_GENERATED = Counter(
    "larder_shopping_items_generated_total",
    "Number of shopping list items produced by list generation",
    ["source"],
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "MEAL_PLANS_GENERATED",
    "SHOPPING_ITEMS_GENERATED",
]
