"""Group endpoints. Reads are public, writes need the Admin role."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import (
    GroupInsert,
    GroupRecordsResponse,
    GroupResponse,
    GroupUpdate,
)
from app.application.services import GroupService
from app.application.validators import validate_group_insert, validate_group_update
from app.infrastructure.dependencies import get_group_service
from app.presentation.api.auth import require_admin

from .common import bad_request, check_positive_id, not_found, raise_if_invalid

router = APIRouter(prefix="/groups", tags=["Groups"])

MIN_SEARCH_LENGTH = 2


@router.get("", response_model=list[GroupResponse])
async def list_groups(
    service: GroupService = Depends(get_group_service),
) -> list[GroupResponse]:
    return await service.list_groups()


@router.get("/with-records", response_model=list[GroupRecordsResponse])
async def list_groups_with_records(
    service: GroupService = Depends(get_group_service),
) -> list[GroupRecordsResponse]:
    """Every group together with its records."""
    return await service.list_groups_with_records()


@router.get("/search/{text}", response_model=list[GroupResponse])
async def search_groups(
    text: str,
    service: GroupService = Depends(get_group_service),
) -> list[GroupResponse]:
    """Case-insensitive substring search on the group name."""
    if not text.strip():
        raise bad_request("The search text cannot be empty")
    if len(text) < MIN_SEARCH_LENGTH:
        raise bad_request(f"The search text must have at least {MIN_SEARCH_LENGTH} characters")
    groups = await service.search_by_name(text)
    if not groups:
        raise not_found(f"No groups found with the name '{text}'")
    return groups


@router.get("/sorted/{ascending}", response_model=list[GroupResponse])
async def sorted_groups(
    ascending: bool,
    service: GroupService = Depends(get_group_service),
) -> list[GroupResponse]:
    return await service.get_sorted_by_name(ascending)


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(
    group_id: int,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    check_positive_id(group_id, "group")
    group = await service.get_group(group_id)
    if group is None:
        raise not_found(f"The group with ID {group_id} was not found")
    return group


@router.get("/{group_id}/records", response_model=GroupRecordsResponse)
async def get_group_records(
    group_id: int,
    service: GroupService = Depends(get_group_service),
) -> GroupRecordsResponse:
    check_positive_id(group_id, "group")
    group = await service.get_records_by_group(group_id)
    if group is None:
        raise not_found(f"The group with ID {group_id} was not found")
    return group


@router.post(
    "",
    response_model=GroupResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin())],
)
async def create_group(
    data: GroupInsert,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    raise_if_invalid(validate_group_insert(data))
    return await service.create_group(data)


@router.put(
    "/{group_id}",
    response_model=GroupResponse,
    dependencies=[Depends(require_admin())],
)
async def update_group(
    group_id: int,
    data: GroupUpdate,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    check_positive_id(group_id, "group")
    raise_if_invalid(validate_group_update(data))
    if group_id != data.id:
        raise bad_request("The ID in the route does not match the ID in the body")
    group = await service.update_group(group_id, data)
    if group is None:
        raise not_found(f"The group with ID {group_id} was not found")
    return group


@router.delete(
    "/{group_id}",
    response_model=GroupResponse,
    dependencies=[Depends(require_admin())],
)
async def delete_group(
    group_id: int,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    """Delete a group; 409 while it still owns records."""
    check_positive_id(group_id, "group")
    group = await service.delete_group(group_id)
    if group is None:
        raise not_found(f"The group with ID {group_id} was not found")
    return group
