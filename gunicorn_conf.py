import multiprocessing
import os

# gunicorn -c gunicorn_conf.py taskez.main:app

# Frontend expects the API on 3001
bind = os.getenv("BIND", "0.0.0.0:3001")

workers = int(os.getenv("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"

timeout = 120
keepalive = 5

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info")

name = "task_ez_api"
reload = False
