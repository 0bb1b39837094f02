"""
Tag API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_tag_service
from shared.models import AuthenticatedUser

from .interfaces import ITagService
from .models import CreateTagRequest, DeleteResponse, Tag, UpdateTagRequest

router = APIRouter()


@router.get("", response_model=list[Tag])
async def list_tags(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITagService = Depends(get_tag_service),
) -> list[Tag]:
    """
    List the current user's tags, ordered by name.
    """
    return await service.list_tags(user.id)


@router.post("", response_model=Tag, status_code=201)
async def create_tag(
    request: CreateTagRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITagService = Depends(get_tag_service),
) -> Tag:
    """
    Create a tag. Returns 409 if the user already has one with this name.
    """
    return await service.create_tag(user.id, request)


@router.get("/{tag_id}", response_model=Tag)
async def get_tag(
    tag_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITagService = Depends(get_tag_service),
) -> Tag:
    return await service.get_tag(tag_id, user.id)


@router.put("/{tag_id}", response_model=Tag)
async def update_tag(
    tag_id: int,
    request: UpdateTagRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITagService = Depends(get_tag_service),
) -> Tag:
    """
    Rename or recolour a tag.
    """
    return await service.update_tag(tag_id, user.id, request)


@router.delete("/{tag_id}", response_model=DeleteResponse)
async def delete_tag(
    tag_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITagService = Depends(get_tag_service),
) -> DeleteResponse:
    """
    Delete a tag and remove it from every note.
    """
    await service.delete_tag(tag_id, user.id)
    return DeleteResponse(message="Tag deleted successfully")
