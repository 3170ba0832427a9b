import os

bind = f"0.0.0.0:{os.getenv('PORT', '10000')}"
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("WEB_CONCURRENCY", "1"))  # rate-limit table is per worker

# upstream call is capped at LLM_TIMEOUT_SECONDS (55s); leave headroom
timeout = int(os.getenv("GUNICORN_TIMEOUT", "75"))
graceful_timeout = 30
keepalive = 75

max_requests = int(os.getenv("MAX_REQUESTS", "1000"))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", "100"))

# stdout / stderr, picked up by the platform
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
