"""
Router utility functions.

Contains helpers shared by the router endpoints.
"""

from study_gateway.api.routers.router_utils.error_handling import (
    handle_gateway_errors,
    rate_limit_http_exception,
)

__all__ = [
    "handle_gateway_errors",
    "rate_limit_http_exception",
]
