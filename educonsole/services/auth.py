"""Login, logout and session endpoints under ``/api/v1/auth``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from educonsole.client import ApiClient
from educonsole.models.access import (
    AccessToken,
    LoginRequest,
    LoginResponse,
    RefreshedToken,
    User,
)
from educonsole.models.envelope import ApiResponse, is_success
from educonsole.services.base import API_PREFIX

logger = logging.getLogger(__name__)


class AuthService:
    """Session management on top of the shared ``ApiClient``.

    A successful ``login`` or ``refresh_token`` installs the returned token
    on the client, so every later call carries ``Authorization: Bearer``.
    """

    base_path = f"{API_PREFIX}/auth"

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def login(
        self, credentials: LoginRequest | dict[str, Any]
    ) -> ApiResponse[LoginResponse]:
        if isinstance(credentials, dict):
            credentials = LoginRequest.model_validate(credentials)
        response = await self._client.post(
            f"{self.base_path}/login", credentials, data_type=LoginResponse
        )
        token = token_from_login(response)
        if token:
            self._client.set_auth_token(token)
            logger.info("Login succeeded (user_type=%s)", credentials.user_type.value)
        return response

    async def logout(self) -> ApiResponse[Any]:
        """Tell the server, then drop the local token whatever it answered."""
        try:
            return await self._client.post(f"{self.base_path}/logout")
        finally:
            self._client.remove_auth_token()

    async def refresh_token(self, refresh_token: str) -> ApiResponse[RefreshedToken]:
        response = await self._client.post(
            f"{self.base_path}/refresh",
            {"refreshToken": refresh_token},
            data_type=RefreshedToken,
        )
        token = None
        if is_success(response):
            data = response.data
            if isinstance(data, RefreshedToken):
                token = data.token
            elif isinstance(data, Mapping) and isinstance(data.get("token"), str):
                token = data["token"]
        if token:
            self._client.set_auth_token(token)
        return response

    async def me(self) -> ApiResponse[User]:
        return await self._client.get(f"{self.base_path}/me", data_type=User)

    def is_authenticated(self) -> bool:
        return self._client.is_authenticated()


# ---------------------------------------------------------------------------
# Login response helpers
# ---------------------------------------------------------------------------


def _login_data(response: ApiResponse[LoginResponse]) -> LoginResponse | None:
    """The login payload as a model, or None when it cannot be read as one."""
    if not is_success(response) or response.data is None:
        return None
    data = response.data
    if isinstance(data, LoginResponse):
        return data
    if isinstance(data, Mapping):
        try:
            return LoginResponse.model_validate(data)
        except ValidationError:
            return None
    return None


def token_from_login(response: ApiResponse[LoginResponse]) -> str | None:
    login = _login_data(response)
    if login is not None:
        access = login.access_token
        return access.bearer if access is not None else None
    # Raw payload whose other parts did not parse: the token pair alone still counts.
    if is_success(response) and isinstance(response.data, Mapping):
        raw = response.data.get("access_token")
        if isinstance(raw, Mapping):
            try:
                return AccessToken.model_validate(raw).bearer
            except ValidationError:
                return None
    return None


def user_from_login(response: ApiResponse[LoginResponse]) -> User | None:
    """Flatten the login payload into the session ``User``."""
    login = _login_data(response)
    if login is None or login.employee is None:
        return None
    employee = login.employee
    access = login.access_token
    return User(
        id=employee.id,
        email=employee.email,
        name=employee.name,
        user_type=login.user_type,
        role=employee.role,
        center_id=employee.center_id,
        access_token=access.bearer if access else None,
        refresh_token=access.refresh_token if access else None,
        status=employee.status,
    )


def is_login_success(response: ApiResponse[LoginResponse]) -> bool:
    return token_from_login(response) is not None


__all__ = [
    "AuthService",
    "is_login_success",
    "token_from_login",
    "user_from_login",
]
