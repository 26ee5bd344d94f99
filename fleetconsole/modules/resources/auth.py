"""Auth endpoints. Not a CRUD collection, so not a ResourceClient."""

from typing import Any

from fleetconsole.modules.http.interfaces import IApiClient


class AuthApi:
    def __init__(self, api: IApiClient):
        self._api = api

    async def login(self, credentials: dict[str, Any]) -> dict[str, Any]:
        return await self._api.post("/auth/login", credentials)

    async def register(self, user_data: dict[str, Any]) -> dict[str, Any]:
        return await self._api.post("/auth/register", user_data)

    async def logout(self) -> dict[str, Any]:
        return await self._api.post("/auth/logout")

    async def get_profile(self) -> dict[str, Any]:
        return await self._api.get("/auth/me")

    async def verify_token(self) -> dict[str, Any]:
        return await self._api.get("/auth/verify-token")

    async def change_password(self, password_data: dict[str, Any]) -> dict[str, Any]:
        return await self._api.put("/auth/change-password", password_data)

    async def forgot_password(self, email: str) -> dict[str, Any]:
        return await self._api.post("/auth/forgot-password", {"email": email})

    async def reset_password(self, token: str, password: str) -> dict[str, Any]:
        return await self._api.post(
            "/auth/reset-password", {"token": token, "password": password}
        )
