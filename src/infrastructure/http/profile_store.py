"""HTTP client for the profile API, usable as a synchronizer store."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

import httpx
import structlog

from core.config import settings
from core.exceptions import ErrorCode, ProfileStoreError
from domain.entities.profile import ProfileRecord, ProfileUpdate

logger = structlog.get_logger()

PROFILES_PATH = "/api/v1/profiles"


class HttpProfileStore:
    """IProfileStore implementation over ``/api/v1/profiles/{id}``.

    A 404 carrying ``PROFILE_NOT_FOUND`` is the "record absent" outcome and
    maps to None. Every other non-2xx answer, and any transport error, raises
    ``ProfileStoreError`` carrying the server's message when it has one.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = settings.profile_store_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {"Authorization": f"Bearer {access_token}"}
        self._timeout = timeout
        self._transport = transport

    async def get(self, identity: UUID) -> ProfileRecord | None:
        response = await self._request("GET", identity)
        if self._is_record_absent(response):
            return None
        self._raise_for_error(response)
        return self._to_entity(response.json()["data"])

    async def upsert(self, identity: UUID, update: ProfileUpdate) -> ProfileRecord:
        response = await self._request("PUT", identity, json=self._to_payload(update))
        self._raise_for_error(response)
        return self._to_entity(response.json()["data"])

    async def _request(
        self, method: str, identity: UUID, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        url = f"{self._base_url}{PROFILES_PATH}/{identity}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                return await client.request(method, url, headers=self._headers, json=json)
        except httpx.HTTPError as e:
            logger.warning(
                "profile_store_unreachable",
                method=method,
                profile_id=str(identity),
                error=str(e),
            )
            raise ProfileStoreError(f"Profile store unreachable: {e}") from e

    def _is_record_absent(self, response: httpx.Response) -> bool:
        # Only the profile service's own not-found answer means absent.
        if response.status_code != 404:
            return False
        try:
            body = response.json()
        except ValueError:
            return False
        return (
            isinstance(body, dict)
            and body.get("error_code") == ErrorCode.PROFILE_NOT_FOUND.value
        )

    def _raise_for_error(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        message = f"Profile store returned HTTP {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
        raise ProfileStoreError(message, status_code=response.status_code)

    def _to_payload(self, update: ProfileUpdate) -> dict[str, Any]:
        return {
            "email": update.email,
            "full_name": update.full_name,
            "date_of_birth": update.date_of_birth.isoformat() if update.date_of_birth else None,
            "user_role": update.user_role,
            "gender": update.gender,
            "avatar_url": update.avatar_url,
            "updated_at": update.updated_at.isoformat(),
        }

    def _to_entity(self, data: dict[str, Any]) -> ProfileRecord:
        raw_date = data.get("date_of_birth")
        raw_updated = data.get("updated_at")
        return ProfileRecord(
            id=UUID(data["id"]),
            email=data["email"],
            full_name=data.get("full_name"),
            date_of_birth=date.fromisoformat(raw_date) if raw_date else None,
            user_role=data.get("user_role"),
            gender=data.get("gender"),
            avatar_url=data.get("avatar_url"),
            updated_at=datetime.fromisoformat(raw_updated) if raw_updated else None,
        )
