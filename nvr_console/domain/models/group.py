# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ..constants import GroupFields
from ..exceptions import InvalidInputError


@dataclass
class Group:
    """Camera group. The name is the primary key; cameras reference it by name."""
    name: str
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 1:
            raise InvalidInputError(
                "Group name is required",
                fields={GroupFields.NAME: "Group name is required"},
            )
