# Middleware package init
"""
Finance Tracker Backend — Middleware Package
==============================================

Middleware Chain (execution order for a request):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: generate or accept the correlation id
    2. Logging: log method, path, status and duration with that id
    3. GZip / CORS: standard Starlette middleware
"""
