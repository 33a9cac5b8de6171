# Middleware package init
"""
Roster Backend — Middleware Package
====================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    Request ID runs first so every access log line and error body carries
    the same correlation ID that is returned in the X-Request-ID header.
"""
