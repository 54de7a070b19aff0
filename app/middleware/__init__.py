"""HTTP middleware: timeout, request ID, correlation ID, security headers.

Applied in main app; order matters (last added = outermost).
Import and use from app.main.
"""

from app.middleware.correlation_id import CorrelationIDMiddleware
from app.middleware.request_id import RequestIDMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
