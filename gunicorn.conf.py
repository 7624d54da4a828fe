# Recidiviz - a data platform for criminal justice reform
# Copyright (C) 2026 Recidiviz, Inc.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Configures gunicorn to serve the custody records API.

    gunicorn -c gunicorn.conf.py "custody_api.server:create_app()"
"""
import logging
import multiprocessing
import os

from gunicorn.arbiter import Arbiter
from gunicorn.workers.base import Worker

from custody_api.persistence.database.sqlalchemy_engine_manager import (
    SQLAlchemyEngineManager,
)

# Every worker holds its own connection pool, so the worker count bounds the
# number of connections to the records database.
workers = int(os.getenv("CUSTODY_API_WORKERS", multiprocessing.cpu_count() + 1))
# Use a threaded worker; requests spend most of their time waiting on the database
worker_class = "gthread"
threads = int(os.getenv("CUSTODY_API_THREADS", "4"))
bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
timeout = 60
loglevel = "info"
accesslog = "-"
errorlog = "-"
keepalive = 75


def worker_exit(_server: Arbiter, worker: Worker) -> None:
    logging.info("Disposing database engines for worker %s", worker)
    SQLAlchemyEngineManager.teardown_engines()
