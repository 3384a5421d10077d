"""
Admin Service - Admin membership checks and seeding of the default admin
"""
import logging
from typing import Optional, Tuple

from sqlalchemy import select

from moodlift.config.settings import get_settings
from moodlift.core.exceptions import (
    RemoteStoreError,
    RemoteTimeoutError,
    RequestValidationFailed,
    StoreConfigurationError,
)
from moodlift.core.store import RemoteStore
from moodlift.models.admin_user import AdminUser
from moodlift.schemas.user import AdminCheckResponse
from moodlift.services.storage_client import SupabaseRestClient

logger = logging.getLogger(__name__)


class AdminService:
    """Admin membership lookups against `admin_users`"""

    def __init__(self, store: RemoteStore, rest_client: Optional[SupabaseRestClient] = None):
        self.store = store
        self.rest_client = rest_client

    async def _admin_emails(self) -> list[str]:
        async with self.store.session() as db:
            result = await db.execute(select(AdminUser.email))
            return [row.email for row in result]

    async def check_admin(self, email: Optional[str]) -> Tuple[int, AdminCheckResponse]:
        """
        Decide whether an email belongs to an admin

        In development every failure path, and an unknown email, grants
        access so the dashboard can be used without a seeded table.

        Args:
            email: Address to look up; compared trimmed and lowercased

        Returns:
            (status_code, response body)
        """
        if not email:
            return 400, AdminCheckResponse(isAdmin=False)

        dev = get_settings().is_development()
        timeout = get_settings().database.query_timeout_seconds

        try:
            emails = await self.store.with_timeout("Admin lookup", self._admin_emails(), timeout)
        except StoreConfigurationError as e:
            logger.error(f"Admin check without store configuration: {e.message}")
            if dev:
                logger.info("Development mode: allowing admin access (store not configured)")
                return 200, AdminCheckResponse(isAdmin=True)
            return 500, AdminCheckResponse(
                isAdmin=False,
                error="Server configuration incomplete. Please set DATABASE_URL and SUPABASE_SERVICE_ROLE_KEY.",
            )
        except RemoteTimeoutError as e:
            logger.error(f"Admin check timed out: {e.message}")
            return 504, AdminCheckResponse(isAdmin=False, error="Admin lookup timed out")
        except RemoteStoreError as e:
            logger.error(f"Admin check error (fetch): {e.message}")
            if dev:
                logger.info("Development mode: allowing admin access")
                return 200, AdminCheckResponse(isAdmin=True)
            return 200, AdminCheckResponse(isAdmin=False, error="Failed to check admin status")

        normalized = email.strip().lower()
        if any((e or "").strip().lower() == normalized for e in emails):
            return 200, AdminCheckResponse(isAdmin=True)

        if dev:
            logger.info(f"Development mode: allowing admin access for {email}")
            return 200, AdminCheckResponse(isAdmin=True)
        return 200, AdminCheckResponse(isAdmin=False)

    async def seed_admin(self) -> str:
        """
        Create the configured admin account and grant it the admin role

        Returns:
            The seeded email address

        Raises:
            StoreConfigurationError: no seed password or backend credentials
            RequestValidationFailed: the auth user or the admin row was rejected
        """
        supabase = get_settings().supabase
        if not supabase.admin_seed_password:
            raise StoreConfigurationError(["SUPABASE_ADMIN_SEED_PASSWORD"])
        if self.rest_client is None:
            raise StoreConfigurationError(["SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"])

        email = supabase.admin_seed_email
        try:
            created = await self.rest_client.create_auth_user(email, supabase.admin_seed_password)
        except RemoteStoreError as e:
            raise RequestValidationFailed(f"Failed to create auth user: {e.message}")

        user_id = created.get("id") or (created.get("user") or {}).get("id")
        if not user_id:
            raise RequestValidationFailed("User created but no ID returned")

        try:
            async with self.store.session() as db:
                db.add(AdminUser(id=user_id, email=email, role="admin"))
        except RemoteStoreError as e:
            raise RequestValidationFailed(f"Failed to add admin role: {e.message}")

        logger.info("Default admin user created", extra={"admin_email": email})
        return email
