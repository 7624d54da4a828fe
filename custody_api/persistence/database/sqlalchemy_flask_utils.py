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
"""Implements helpers for working with SQLAlchemy in a Flask app.

Each request handler reads through `current_session`, which resolves to the
scoped session registered on the current app. Sessions are removed when the
app context is torn down, so no request sees another's identity map.
"""
from threading import get_ident
from typing import Any, Callable, Optional

from flask import Flask, current_app, has_app_context
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker
from werkzeug.local import LocalProxy

from custody_api.persistence.database.sqlalchemy_engine_manager import (
    SQLAlchemyEngineManager,
)

SCOPED_SESSION_EXTENSION = "custody_api.scoped_session"


def setup_scoped_sessions(app: Flask, database_url: str) -> Engine:
    engine = SQLAlchemyEngineManager.get_or_init_engine(database_url)

    # The API never writes, so objects are not expired after a commit
    flask_scoped_session(sessionmaker(bind=engine, expire_on_commit=False), app)

    return engine


def _get_session() -> Session:
    if not has_app_context():
        raise RuntimeError(
            "Cannot access current_session when outside of an application context."
        )
    session = current_app.extensions.get(SCOPED_SESSION_EXTENSION)
    if session is None:
        raise RuntimeError(
            f"No scoped session registered on {current_app}, call setup_scoped_sessions() first."
        )
    return session


current_session: Session = LocalProxy(_get_session)  # type: ignore[assignment]


class flask_scoped_session(scoped_session):
    """A scoped_session with one session per request thread, removed on
    app context teardown."""

    def __init__(
        self, session_factory: Callable[[], Session], app: Optional[Flask] = None
    ) -> None:
        super().__init__(session_factory, scopefunc=get_ident)

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.extensions[SCOPED_SESSION_EXTENSION] = self

        @app.teardown_appcontext
        def remove_scoped_session(*_args: Any, **_kwargs: Any) -> None:
            self.remove()
