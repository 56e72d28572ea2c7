"""
Security Utilities

JWT bearer token handling.

Tokens are issued by the identity service (login/registration live there) and
only verified here. create_access_token() mirrors the issuer's format and is
used by tests and local tooling.

Token Payload:
==============
    {"user_id": 12, "username": "peter", "iat": ..., "exp": ...}

Usage:
======
    from heroflicks.shared.utils.security import SecurityUtils

    token = SecurityUtils.create_access_token(
        data={"user_id": 12},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(hours=1)
    )

    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt


class SecurityUtils:
    """JWT token creation and validation."""

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., user_id)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 7 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        to_encode.update({
            "exp": now + (expires_delta or timedelta(days=7)),
            "iat": now,
        })
        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

    @staticmethod
    def user_id_from_payload(payload: dict) -> int:
        """
        Extract the numeric user id from a decoded payload.

        Raises:
            ValueError: If the claim is missing or not an integer
        """
        raw = payload.get("user_id", payload.get("id"))
        if isinstance(raw, bool) or raw is None:
            raise ValueError("Token payload has no user id")
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ValueError("Token user id is not numeric")
