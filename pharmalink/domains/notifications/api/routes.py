"""
Notifications API Routes
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from pharmalink.api.dependencies import CurrentIdentity
from pharmalink.api.responses import ok
from pharmalink.domains.notifications.api.dependencies import (
    get_list_notifications_use_case,
    get_mark_all_read_use_case,
    get_mark_notification_read_use_case,
    get_register_device_token_use_case,
)
from pharmalink.domains.notifications.api.schemas import DeviceTokenBody
from pharmalink.domains.notifications.application.use_cases import (
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    RegisterDeviceTokenUseCase,
)

router = APIRouter(prefix="/notifications", tags=["Notifications"])

ListNotificationsUseCaseDep = Annotated[ListNotificationsUseCase, Depends(get_list_notifications_use_case)]
MarkReadUseCaseDep = Annotated[MarkNotificationReadUseCase, Depends(get_mark_notification_read_use_case)]
MarkAllReadUseCaseDep = Annotated[MarkAllNotificationsReadUseCase, Depends(get_mark_all_read_use_case)]
RegisterTokenUseCaseDep = Annotated[RegisterDeviceTokenUseCase, Depends(get_register_device_token_use_case)]


@router.get("")
async def list_notifications(identity: CurrentIdentity, use_case: ListNotificationsUseCaseDep):
    notifications = await use_case.execute(identity)
    return ok([n.to_dict() for n in notifications])


@router.put("/read-all")
async def mark_all_read(identity: CurrentIdentity, use_case: MarkAllReadUseCaseDep):
    updated = await use_case.execute(identity)
    return ok({"updated": updated})


@router.put("/{notification_id}/read")
async def mark_read(notification_id: str, identity: CurrentIdentity, use_case: MarkReadUseCaseDep):
    await use_case.execute(identity, notification_id)
    return ok(message="Notification marked as read")


@router.post("/device-token")
async def register_device_token(body: DeviceTokenBody, identity: CurrentIdentity, use_case: RegisterTokenUseCaseDep):
    created = await use_case.execute(identity, body.token)
    return ok({"registered": created})
