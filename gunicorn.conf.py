import multiprocessing
import os

from moviedb.config import settings

wsgi_app = "moviedb.main:app"
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("WORKERS", max(2, multiprocessing.cpu_count() * 2 + 1)))
proc_name = "moviedb-api"

bind = f"{settings.HOST}:{settings.PORT}"
timeout = 120
keepalive = 5
graceful_timeout = 30

max_requests = 1000
max_requests_jitter = 50

# Access and error lines share stdout with the moviedb.* loggers
accesslog = "-"
errorlog = "-"
loglevel = settings.LOG_LEVEL.lower()
_level = settings.LOG_LEVEL.upper()
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s %(D)sus'

_console = {"level": _level, "handlers": ["console"], "propagate": False}

logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "moviedb": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "moviedb",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {"level": _level, "handlers": ["console"]},
    "loggers": {
        "moviedb": _console,
        "gunicorn.error": _console,
        "gunicorn.access": _console,
    },
}
