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
This module contains the bearer token authorization flow used by the API routes.
"""
from functools import wraps
from http import HTTPStatus
from typing import Any, Callable, Dict, List, Optional

import jwt
from flask import request

from custody_api.utils.flask_exception import FlaskException
from custody_api.utils.types import TokenClaims


class AuthorizationError(FlaskException):
    """Exception for when the authorization flow fails."""

    def __init__(self, code: str, description: str) -> None:
        super().__init__(code, description, HTTPStatus.UNAUTHORIZED)


class JwtConfig:
    """Data object for wrapping/validating our token verification configuration"""

    def __init__(
        self,
        verification_key: str,
        algorithms: List[str],
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ) -> None:
        # Public key (RS256) or shared secret (HS256) that tokens are signed with
        self.verification_key = verification_key

        # Algorithms to use when decoding JWTs
        self.algorithms = algorithms

        # The "aud" (audience) claim identifies the recipients that the JWT is intended for.
        # If set and presented with a token that does not match this audience, we will raise an `AuthorizationError`
        self.audience = audience

        # The "iss" (issuer) claim identifies the application that issued the token
        self.issuer = issuer

        if not self.algorithms:
            raise ValueError("At least one token signing algorithm must be configured")
        if "none" in (algorithm.lower() for algorithm in self.algorithms):
            raise ValueError("Unsigned tokens are not supported")

    def decode(self, token: str) -> TokenClaims:
        options: Dict[str, Any] = {"verify_aud": self.audience is not None}
        return jwt.decode(
            token,
            self.verification_key,
            algorithms=self.algorithms,
            audience=self.audience,
            issuer=self.issuer,
            options=options,
        )


def get_token_auth_header() -> str:
    """Obtains the Access Token from the Authorization Header"""
    auth = request.headers.get("Authorization", None)
    if not auth:
        raise AuthorizationError(
            code="authorization_header_missing",
            description="Authorization header is expected",
        )

    parts = auth.split()

    if not parts or parts[0].lower() != "bearer":
        raise AuthorizationError(
            code="invalid_header",
            description="Authorization header must start with Bearer",
        )
    if len(parts) == 1:
        raise AuthorizationError(
            code="invalid_header",
            description="Token not found",
        )
    if len(parts) > 2:
        raise AuthorizationError(
            code="invalid_header",
            description="Authorization header must be Bearer token",
        )

    return parts[1]


def build_jwt_authorization_decorator(
    authorization_config: JwtConfig, on_successful_authorization: Callable
) -> Callable:
    """Decorator builder for bearer token authorization"""

    def decorated(route: Callable) -> Callable:
        @wraps(route)
        def inner(*args: List[Any], **kwargs: Dict[str, Any]) -> Any:
            """
            Determines if the access token provided in the request `Authorization` header is valid
            If it is not valid, raise an exception
            If it is valid, call our `on_successful_authorization` callback before executing the decorated route
            """
            token = get_token_auth_header()

            try:
                payload = authorization_config.decode(token)
            except jwt.ExpiredSignatureError as e:
                raise AuthorizationError(
                    code="token_expired",
                    description="token is expired",
                ) from e
            except (
                jwt.InvalidIssuerError,
                jwt.InvalidAudienceError,
                jwt.MissingRequiredClaimError,
            ) as e:
                raise AuthorizationError(
                    code="invalid_claims",
                    description="incorrect claims, please check the audience and issuer",
                ) from e
            except jwt.InvalidTokenError as e:
                raise AuthorizationError(
                    code="invalid_header",
                    description="Unable to parse authentication token.",
                ) from e

            on_successful_authorization(payload)

            return route(*args, **kwargs)

        return inner

    return decorated
