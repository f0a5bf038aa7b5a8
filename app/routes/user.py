"""
User account routes - notification preferences, sign-in providers, notifications
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List
from fastapi import APIRouter, Depends, HTTPException, status
from app.config.database import Collections
from app.database.db_operations import DBOperations, to_object_id
from app.dependencies import get_db_ops
from app.models.user import (
    CONNECTED_ACCOUNT_KEYS,
    MessageResponse,
    NotificationPreferencesUpdate,
    NotificationResponse,
    ProviderDisconnect,
)
from app.utils.auth import get_current_user
from app.utils.helpers import serialize_docs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["User"])

@router.put("/update-notifications", response_model=MessageResponse)
async def update_notifications(
    preferences: NotificationPreferencesUpdate,
    current_user: Dict = Depends(get_current_user),
    db: DBOperations = Depends(get_db_ops),
):
    """Turn booking notifications on or off for the signed-in user"""
    try:
        matched = await db.update_one(
            Collections.USERS,
            {"email": current_user["email"]},
            {
                "notificationsEnabled": preferences.notificationsEnabled,
                "updatedAt": datetime.now(timezone.utc),
            },
        )
    except Exception:
        logger.exception("❌ Notification update error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while updating notification preferences"
        )

    if matched == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return {"message": "Notification preferences updated successfully"}

@router.post("/disconnect-provider", response_model=MessageResponse)
async def disconnect_provider(
    body: ProviderDisconnect,
    current_user: Dict = Depends(get_current_user),
    db: DBOperations = Depends(get_db_ops),
):
    """Unlink a social sign-in provider, never the last way to sign in"""
    if body.provider not in CONNECTED_ACCOUNT_KEYS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid provider specified")

    email = current_user["email"]
    try:
        user = await db.get_one(Collections.USERS, {"email": email})
    except Exception:
        logger.exception("❌ Error loading user for provider disconnect")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while disconnecting provider"
        )
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    connected = user.get("connectedAccounts") or {}
    connected_count = sum(
        1
        for provider, account_key in CONNECTED_ACCOUNT_KEYS.items()
        if user.get("provider") == provider or connected.get(account_key)
    )
    if connected_count <= 1 and not user.get("password"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot disconnect the only authentication method. Please set a password first."
        )

    update_data = {f"connectedAccounts.{CONNECTED_ACCOUNT_KEYS[body.provider]}": False}
    if user.get("provider") == body.provider:
        update_data["provider"] = None

    try:
        await db.update_one(Collections.USERS, {"email": email}, update_data)
    except Exception:
        logger.exception("❌ Error disconnecting provider %s", body.provider)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while disconnecting provider"
        )
    return {"message": "Provider disconnected successfully"}

@router.get("/notifications", response_model=List[NotificationResponse])
async def get_notifications(
    skip: int = 0,
    limit: int = 50,
    current_user: Dict = Depends(get_current_user),
    db: DBOperations = Depends(get_db_ops),
):
    """Notifications for the signed-in user, newest first"""
    try:
        notifications = await db.get_all(
            Collections.NOTIFICATIONS,
            {"userEmail": current_user["email"]},
            sort=[("date", -1)],
            skip=skip,
            limit=limit,
        )
    except Exception:
        logger.exception("❌ Failed to fetch notifications")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching notifications"
        )
    return serialize_docs(notifications)

@router.patch("/notifications/{notification_id}/read", response_model=MessageResponse)
async def mark_notification_read(
    notification_id: str,
    current_user: Dict = Depends(get_current_user),
    db: DBOperations = Depends(get_db_ops),
):
    """Mark one of the user's notifications as read"""
    object_id = to_object_id(notification_id)
    if object_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")

    try:
        matched = await db.update_one(
            Collections.NOTIFICATIONS,
            {"_id": object_id, "userEmail": current_user["email"]},
            {"read": True},
        )
    except Exception:
        logger.exception("❌ Failed to mark notification %s as read", notification_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while updating the notification"
        )

    if matched == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return {"message": "Notification marked as read"}
