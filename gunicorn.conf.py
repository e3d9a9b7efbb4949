"""Gunicorn config for deployment: gunicorn census_dashboard.main:app -c gunicorn.conf.py"""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers — each loads its own catalog and table cache.
# Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

timeout = 30

# Graceful timeout for shutdown
graceful_timeout = 30

# Keep-alive — must exceed the proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
