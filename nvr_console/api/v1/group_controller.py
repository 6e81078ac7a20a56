# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.group_dto import GroupCreateRequest, GroupResponse
from ...application.dto.common_dto import SuccessResponse
from ...application.use_cases.group.list_groups import ListGroupsUseCase
from ...application.use_cases.group.create_group import CreateGroupUseCase
from ...application.use_cases.group.delete_group import DeleteGroupUseCase
from ...di.container import get_container


router = APIRouter(tags=["groups"])


@router.get("", response_model=List[str])
async def list_groups() -> List[str]:
    """List group names in lexicographic order"""
    container = get_container()
    list_groups_use_case = container.get(ListGroupsUseCase)
    
    return await list_groups_use_case.execute()


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
async def create_group(request: GroupCreateRequest) -> GroupResponse:
    """Create a group; an existing name is left as it is"""
    container = get_container()
    create_group_use_case = container.get(CreateGroupUseCase)
    
    return await create_group_use_case.execute(request=request)


@router.delete("/{name}", response_model=SuccessResponse)
async def delete_group(name: str) -> SuccessResponse:
    """Delete a group; its cameras are kept with no group"""
    container = get_container()
    delete_group_use_case = container.get(DeleteGroupUseCase)
    
    await delete_group_use_case.execute(name=name)
    return SuccessResponse()
