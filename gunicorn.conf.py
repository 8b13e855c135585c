# Gunicorn configuration for the markdown blog
# Run with: gunicorn -c gunicorn.conf.py wsgi:app

import multiprocessing
import os

# Server socket
bind = os.getenv("GUNICORN_BIND", "127.0.0.1:8000")

# Worker processes
workers = int(os.getenv("GUNICORN_WORKERS", str(multiprocessing.cpu_count() * 2 + 1)))
worker_class = "gthread"
threads = 2

# Worker lifecycle
max_requests = 1000
max_requests_jitter = 100
timeout = 30
keepalive = 2
preload_app = True

# Request limits; post bodies are capped separately by MAX_CONTENT_LENGTH
limit_request_line = 4096
limit_request_fields = 100
limit_request_field_size = 8190

# Logging (stdout/stderr by default so structlog JSON lines land in the same stream)
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'
