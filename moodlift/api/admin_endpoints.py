"""
Admin system endpoints - asset bucket, admin check and admin seeding
"""
import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from moodlift.api.admin_content_endpoints import admin_error
from moodlift.core.exceptions import MoodLiftException
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.user import AdminCheckRequest
from moodlift.services.admin_service import AdminService
from moodlift.services.storage_client import SupabaseRestClient, get_rest_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/assets")
async def list_assets(client: SupabaseRestClient = Depends(get_rest_client)):
    """
    First 100 files of the assets bucket, created on demand
    """
    try:
        await client.ensure_bucket()
        assets = await client.list_assets()
    except MoodLiftException as e:
        return admin_error(e, "Failed to fetch assets")
    return {"assets": assets}


@router.post("/assets")
async def upload_asset(
    file: Optional[UploadFile] = File(None),
    client: SupabaseRestClient = Depends(get_rest_client),
):
    """
    Upload a file; stored as `<epoch-ms>-<filename>`
    """
    if file is None or not file.filename:
        return JSONResponse(status_code=400, content={"error": "No file provided"})

    name = f"{int(time.time() * 1000)}-{file.filename}"
    content = await file.read()
    try:
        await client.ensure_bucket()
        url = await client.upload_asset(name, content, file.content_type)
    except MoodLiftException as e:
        return admin_error(e)

    return {
        "name": name,
        "url": url,
        "asset": {"name": name, "url": url, "size": len(content)},
    }


@router.delete("/assets")
async def delete_asset(
    name: Optional[str] = None,
    client: SupabaseRestClient = Depends(get_rest_client),
):
    if not name:
        return JSONResponse(status_code=400, content={"error": "File name is required"})
    try:
        await client.ensure_bucket()
        await client.remove_asset(name)
    except MoodLiftException as e:
        return admin_error(e, "Failed to delete asset")
    return {"success": True}


@router.post("/check-admin")
async def check_admin(
    body: AdminCheckRequest,
    store: RemoteStore = Depends(get_store),
):
    """
    Whether an email is registered in `admin_users`

    - **email**: Address to check (case-insensitive)
    """
    status_code, result = await AdminService(store).check_admin(body.email)
    return JSONResponse(status_code=status_code, content=result.model_dump(exclude_none=True))


@router.post("/seed-admin")
async def seed_admin(
    store: RemoteStore = Depends(get_store),
    client: SupabaseRestClient = Depends(get_rest_client),
):
    """
    Create the configured default admin account
    """
    try:
        email = await AdminService(store, client).seed_admin()
    except MoodLiftException as e:
        return admin_error(e, "Failed to seed admin user")
    return {
        "success": True,
        "message": "Default admin user created successfully",
        "email": email,
    }
