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
"""Packages the custody records API.

REQUIRED_PACKAGES are the external packages imported by ./custody_api and must
be manually updated any time a dependency is added to the project.
"""
import setuptools

REQUIRED_PACKAGES = [
    "attrs",
    "cattrs",
    # Needed by PyJWT to verify RS256/ES256 signed tokens
    "cryptography",
    "Flask>=2.0",
    "gunicorn",
    "marshmallow>=3.13",
    "PyJWT>=2.0",
    "SQLAlchemy>=1.4",
]

TEST_PACKAGES = [
    "freezegun",
    "mock",
    "pytest",
]

setuptools.setup(
    name="custody-api",
    version="1.0.0",
    python_requires=">=3.8",
    install_requires=REQUIRED_PACKAGES,
    extras_require={"test": TEST_PACKAGES},
    packages=setuptools.find_packages(include=["custody_api", "custody_api.*"]),
)
