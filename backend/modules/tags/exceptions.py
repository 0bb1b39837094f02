"""
Tags module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class TagNotFoundError(NotFoundError):
    """Raised when a tag does not exist or belongs to another user."""

    def __init__(self, tag_id: int):
        super().__init__(
            "Tag not found",
            code="TAG_NOT_FOUND",
            details={"tag_id": tag_id},
        )


class TagAlreadyExistsError(ConflictError):
    """Raised when the user already has a tag with this name."""

    def __init__(self, name: str):
        super().__init__(
            "Tag with this name already exists",
            code="TAG_ALREADY_EXISTS",
            details={"name": name},
        )
