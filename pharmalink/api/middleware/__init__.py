from pharmalink.api.middleware.logging_middleware import RequestLoggingMiddleware
from pharmalink.api.middleware.rate_limit import RateLimitMiddleware

__all__ = ["RateLimitMiddleware", "RequestLoggingMiddleware"]
