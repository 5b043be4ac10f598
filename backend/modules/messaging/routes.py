"""
Messaging API endpoints.

Messages, access requests and bookmarks for the authenticated caller.
"""

from fastapi import APIRouter, Depends, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_messaging_service
from shared.models import AuthenticatedUser
from modules.accounts.models import ActionResponse
from modules.profiles.models import Profile

from .interfaces import IMessagingService
from .models import Message, ProfileReference, SendMessageRequest

router = APIRouter()


@router.post("/send-message", response_model=ActionResponse, status_code=201)
async def send_message(
    request: SendMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> ActionResponse:
    await service.send_message(user, request.recipient_profile_id, request.content)
    return ActionResponse(message="Message sent successfully")


@router.get("/messages", response_model=list[Message])
async def list_messages(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> list[Message]:
    """Messages sent by the caller or addressed to profiles they own."""
    return await service.list_messages(user)


@router.post("/request-access", response_model=ActionResponse, status_code=201)
async def request_access(
    request: ProfileReference,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> ActionResponse:
    """
    Ask the owner of a profile for access.

    Succeeds for private profiles the caller cannot read; the owner receives
    a message and the profile's visibility is unchanged.
    """
    await service.request_access(user, request.profile_id)
    return ActionResponse(message="Access request sent successfully")


@router.post("/bookmark", response_model=ActionResponse, status_code=201)
async def bookmark_profile(
    request: ProfileReference,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> ActionResponse:
    await service.bookmark_profile(user, request.profile_id)
    return ActionResponse(message="Profile bookmarked successfully")


@router.get("/bookmarks", response_model=list[Profile])
async def list_bookmarks(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> list[Profile]:
    return await service.list_bookmarked_profiles(user)


@router.delete("/bookmarks/{profile_id}", status_code=204)
async def remove_bookmark(
    profile_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> Response:
    await service.remove_bookmark(user, profile_id)
    return Response(status_code=204)
