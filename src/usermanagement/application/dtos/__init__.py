"""Data transfer objects of the application layer."""

from usermanagement.application.dtos.page_dto import PageDTO
from usermanagement.application.dtos.user_dto import (
    UserDTO,
    UserInputDTO,
    UserStatisticsDTO,
)

__all__ = [
    "PageDTO",
    "UserDTO",
    "UserInputDTO",
    "UserStatisticsDTO",
]
