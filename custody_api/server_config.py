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
"""Reads server configuration from the environment.

    CUSTODY_API_DATABASE_URL          SQLAlchemy url of the records database
    CUSTODY_API_JWT_PUBLIC_KEY        key (or shared secret) tokens are verified with
    CUSTODY_API_JWT_PUBLIC_KEY_FILE   path to a file holding the key, used when the
                                      variable above is unset
    CUSTODY_API_JWT_ALGORITHMS        comma separated list, defaults to RS256
    CUSTODY_API_JWT_AUDIENCE          expected "aud" claim, unchecked when unset
    CUSTODY_API_JWT_ISSUER            expected "iss" claim, unchecked when unset
"""
import logging
import os
from typing import List, Optional

from custody_api.utils import environment

DEVELOPMENT_DATABASE_URL = "sqlite:///custody-api-dev.db"
DEFAULT_JWT_ALGORITHMS = "RS256"


def database_url() -> str:
    url = os.getenv("CUSTODY_API_DATABASE_URL")
    if url:
        return url
    if environment.in_development():
        logging.warning(
            "CUSTODY_API_DATABASE_URL is unset, falling back to [%s]",
            DEVELOPMENT_DATABASE_URL,
        )
        return DEVELOPMENT_DATABASE_URL
    raise ValueError("Missing CUSTODY_API_DATABASE_URL configuration")


def jwt_public_key() -> str:
    key = os.getenv("CUSTODY_API_JWT_PUBLIC_KEY")
    if key:
        return key

    key_file = os.getenv("CUSTODY_API_JWT_PUBLIC_KEY_FILE")
    if not key_file:
        raise ValueError(
            "Missing CUSTODY_API_JWT_PUBLIC_KEY or CUSTODY_API_JWT_PUBLIC_KEY_FILE configuration"
        )
    with open(key_file, "r", encoding="utf-8") as f:
        return f.read().strip()


def jwt_algorithms() -> List[str]:
    algorithms = os.getenv("CUSTODY_API_JWT_ALGORITHMS", DEFAULT_JWT_ALGORITHMS)
    return [algorithm.strip() for algorithm in algorithms.split(",") if algorithm.strip()]


def jwt_audience() -> Optional[str]:
    return os.getenv("CUSTODY_API_JWT_AUDIENCE") or None


def jwt_issuer() -> Optional[str]:
    return os.getenv("CUSTODY_API_JWT_ISSUER") or None
