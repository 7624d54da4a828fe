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
"""A class to manage all SQLAlchemy Engines for our database instances."""
import logging
from typing import Any, Dict, Optional

import sqlalchemy
from sqlalchemy.engine import Engine


class SQLAlchemyEngineManager:
    """A class to manage all synchronous SQLAlchemy Engines, keyed by database url."""

    _engine_for_database: Dict[str, Engine] = {}

    @classmethod
    def init_engine_for_db_instance(
        cls,
        db_url: str,
        **dialect_specific_kwargs: Any,
    ) -> Engine:
        """Initializes a sqlalchemy Engine object for the given database and
        caches it for future use."""
        if db_url in cls._engine_for_database:
            raise ValueError(f"Already initialized database [{db_url}]")

        try:
            engine = sqlalchemy.create_engine(db_url, **dialect_specific_kwargs)
        except BaseException as e:
            logging.error(
                "Unable to create engine for database [%s]: %s",
                engine_display_url(db_url),
                str(e),
            )
            raise e
        cls._engine_for_database[db_url] = engine
        return engine

    @classmethod
    def init_engine(cls, db_url: str) -> Engine:
        """Initializes an engine for a server database, with a pool that
        recycles connections and logs how they are being reused."""
        if db_url.startswith("sqlite"):
            return cls.init_engine_for_db_instance(db_url)
        return cls.init_engine_for_db_instance(
            db_url,
            # Log information about how connections are being reused.
            echo_pool=True,
            pool_recycle=3600,
            pool_pre_ping=True,
        )

    @classmethod
    def get_engine_for_database(cls, db_url: str) -> Optional[Engine]:
        return cls._engine_for_database.get(db_url)

    @classmethod
    def get_or_init_engine(cls, db_url: str) -> Engine:
        return cls.get_engine_for_database(db_url) or cls.init_engine(db_url)

    @classmethod
    def teardown_engines(cls) -> None:
        for engine in cls._engine_for_database.values():
            engine.dispose()
        cls._engine_for_database.clear()


def engine_display_url(db_url: str) -> str:
    """Returns the database url with any password masked, for use in logs."""
    return sqlalchemy.engine.make_url(db_url).render_as_string(hide_password=True)
