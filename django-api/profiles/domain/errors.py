"""Domain error codes for the profiles module."""

from enum import Enum

from common.errors import DomainError


class ErrorCode(Enum):
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    PROFILE_IMAGE_NOT_FOUND = "PROFILE_IMAGE_NOT_FOUND"


class ProfileNotFoundError(DomainError):
    http_status = 404

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.PROFILE_NOT_FOUND, message="Profile not found")


class ProfileImageNotFoundError(DomainError):
    http_status = 404

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.PROFILE_IMAGE_NOT_FOUND, message="No profile image found")
