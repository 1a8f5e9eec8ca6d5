"""Gunicorn config for container deployment."""
import os

# Bind to the platform's PORT or the API's default 3001
bind = f"0.0.0.0:{os.environ.get('PORT', '3001')}"

# Uvicorn async workers, each loads its own copy of the catalog at startup.
# Lookups are in-memory, so a couple of workers is plenty. Tune via WEB_CONCURRENCY.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Requests are pure in-memory reads; only startup touches disk
timeout = 30

# Graceful timeout for shutdown
graceful_timeout = 10

# Keep-alive, must exceed a fronting proxy's keep-alive (commonly 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
