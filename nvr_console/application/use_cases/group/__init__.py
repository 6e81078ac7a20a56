from .list_groups import ListGroupsUseCase
from .create_group import CreateGroupUseCase
from .delete_group import DeleteGroupUseCase

__all__ = ["ListGroupsUseCase", "CreateGroupUseCase", "DeleteGroupUseCase"]
