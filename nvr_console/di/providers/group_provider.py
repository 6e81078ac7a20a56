from typing import TYPE_CHECKING
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.repositories.group_repository import GroupRepository
from ...application.use_cases.group.list_groups import ListGroupsUseCase
from ...application.use_cases.group.create_group import CreateGroupUseCase
from ...application.use_cases.group.delete_group import DeleteGroupUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class GroupProvider:
    """Group use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListGroupsUseCase,
            lambda: ListGroupsUseCase(group_repository=container.get(GroupRepository))
        )
        
        container.register_factory(
            CreateGroupUseCase,
            lambda: CreateGroupUseCase(group_repository=container.get(GroupRepository))
        )
        
        container.register_factory(
            DeleteGroupUseCase,
            lambda: DeleteGroupUseCase(
                camera_repository=container.get(CameraRepository),
                group_repository=container.get(GroupRepository),
            )
        )
