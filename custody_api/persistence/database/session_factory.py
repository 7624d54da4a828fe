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
"""
Class for generating SQLAlchemy Sessions objects for a custody records database.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from custody_api.persistence.database.sqlalchemy_engine_manager import (
    SQLAlchemyEngineManager,
)


class SessionFactory:
    """Creates SQLAlchemy sessions for a custody records database"""

    @classmethod
    def for_database(cls, db_url: str) -> Session:
        engine = SQLAlchemyEngineManager.get_engine_for_database(db_url)
        if engine is None:
            raise ValueError("No engine set for the requested database")

        return Session(bind=engine)

    @classmethod
    @contextmanager
    def using_database(cls, db_url: str, *, autocommit: bool = True) -> Iterator[Session]:
        """Yields a session for the given database. If |autocommit| is set, the
        session is committed on a clean exit; it is always rolled back if an
        exception is raised, and always closed."""
        session = cls.for_database(db_url)
        try:
            yield session
            if autocommit:
                session.commit()
        except Exception as e:
            logging.warning("Rolling back session after error: %s", e)
            session.rollback()
            raise
        finally:
            session.close()
