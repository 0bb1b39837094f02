"""
Notes module exceptions.
"""

from shared.exceptions import NotFoundError


class NoteNotFoundError(NotFoundError):
    """
    Raised when a note does not exist or belongs to another user.

    Both cases produce the same error.
    """

    def __init__(self, note_id: int):
        super().__init__(
            "Note not found",
            code="NOTE_NOT_FOUND",
            details={"note_id": note_id},
        )
