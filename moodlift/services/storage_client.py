"""
Hosted backend REST client - file storage bucket and auth admin API.

Uses the service role key; every call raises `StoreConfigurationError` when
the project URL or the key is missing and `RemoteStoreError` when the backend
answers with an error or cannot be reached.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from moodlift.config.settings import get_settings
from moodlift.core.exceptions import RemoteStoreError, StoreConfigurationError, describe_error

logger = logging.getLogger(__name__)

ASSET_LIST_LIMIT = 100


class SupabaseRestClient:
    """Thin async client for the storage and auth-admin endpoints."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = get_settings().supabase
        self.base_url = self.settings.public_base_url
        self.service_key = self.settings.service_role_key
        self.bucket = self.settings.assets_bucket
        self.timeout = self.settings.request_timeout_seconds
        self._transport = transport

    def _require_config(self) -> None:
        missing = []
        if not self.base_url:
            missing.append("SUPABASE_URL")
        if not self.service_key:
            missing.append("SUPABASE_SERVICE_ROLE_KEY")
        if missing:
            raise StoreConfigurationError(missing)

    def _get_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
        }

    def public_url(self, name: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{quote(name)}"

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        self._require_config()
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._get_headers(),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise RemoteStoreError(f"Request to hosted backend failed: {e}") from e

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            message = describe_error(body)
            logger.error(
                f"{method} {path} returned {response.status_code}: {message}",
                extra={"status_code": response.status_code},
            )
            raise RemoteStoreError(message, details={"status_code": response.status_code})

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def list_buckets(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/storage/v1/bucket") or []

    async def create_bucket(self, name: str, public: bool = True) -> None:
        await self._request("POST", "/storage/v1/bucket", json={"id": name, "name": name, "public": public})

    async def ensure_bucket(self) -> None:
        """Create the assets bucket if missing; failures are logged, not raised."""
        self._require_config()
        try:
            buckets = await self.list_buckets()
            if not any(b.get("name") == self.bucket for b in buckets):
                logger.info(f"Creating storage bucket '{self.bucket}'")
                await self.create_bucket(self.bucket, public=True)
        except RemoteStoreError as e:
            logger.error(f"Error ensuring bucket exists: {e.message}")

    async def list_assets(self) -> List[Dict[str, Any]]:
        """
        First page of objects in the assets bucket

        Returns:
            List of dicts with name, url, size, created_at
        """
        files = await self._request(
            "POST",
            f"/storage/v1/object/list/{self.bucket}",
            json={"prefix": "", "limit": ASSET_LIST_LIMIT, "offset": 0},
        ) or []
        return [
            {
                "name": f.get("name"),
                "url": self.public_url(f.get("name")),
                "size": (f.get("metadata") or {}).get("size") or 0,
                "created_at": f.get("created_at"),
            }
            for f in files
        ]

    async def upload_asset(self, name: str, content: bytes, content_type: Optional[str] = None) -> str:
        """Upload without overwriting; returns the public URL."""
        await self._request(
            "POST",
            f"/storage/v1/object/{self.bucket}/{quote(name)}",
            content=content,
            headers={
                "Content-Type": content_type or "application/octet-stream",
                "x-upsert": "false",
            },
        )
        logger.info(f"Uploaded asset {name}", extra={"asset": name, "size": len(content)})
        return self.public_url(name)

    async def remove_asset(self, name: str) -> None:
        await self._request("DELETE", f"/storage/v1/object/{self.bucket}", json={"prefixes": [name]})

    async def create_auth_user(self, email: str, password: str) -> Dict[str, Any]:
        """Create a confirmed user through the auth admin API."""
        return await self._request(
            "POST",
            "/auth/v1/admin/users",
            json={"email": email, "password": password, "email_confirm": True},
        ) or {}


def get_rest_client() -> SupabaseRestClient:
    """FastAPI dependency for the storage/auth client."""
    return SupabaseRestClient()
