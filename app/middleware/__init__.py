"""
Campus Records API - Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assigns the correlation ID used by every log line
    2. Logging: one access line per request, tagged with that ID

Role checks are NOT middleware: they are per-route dependencies
(app.security), so the health check stays reachable anonymously.
"""
