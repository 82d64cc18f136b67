# File: user_registry/core/metrics.py

from prometheus_client import Counter

# Registered on the default registry; exposed as *_requests_total
REGISTER_REQUESTS = Counter("register_requests", "Total number of registration requests")
LOGIN_REQUESTS = Counter("login_requests", "Total number of login requests")
