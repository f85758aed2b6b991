"""Error kinds reported while loading or checking a scene."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Reasons a scene cannot be rendered."""

    OPEN_FAIL = 1
    INVALID_OBJECTS = 2
    MISSING_KEY_ELEMENTS = 3
    INVALID_INPUT = 4
    MALLOC_FAILED = 5
    EXCESS_ELEMENTS = 6
    INSIDE_OBJECT = 7
    ERROR_BIG_FILE_NAME = 8

    def message(self) -> str:
        """The text shown to the user for this error."""
        return _MESSAGES.get(self, "")


_MESSAGES = {
    ErrorKind.OPEN_FAIL: "Error\nFailed to open given file!\n",
    ErrorKind.INVALID_INPUT: "Error\nDetected invalid input in the given file!\n",
    ErrorKind.MALLOC_FAILED: "Error\nSuprise, suprise.... Malloc failed!\n",
    ErrorKind.INVALID_OBJECTS: "Error\nSorry, you used an object we can't handle!\n",
    ErrorKind.MISSING_KEY_ELEMENTS: "Error\nSorry, you forgot to add key elements!\n",
    ErrorKind.EXCESS_ELEMENTS: "Error\nSorry, you added more elements than needed!\n",
    ErrorKind.INSIDE_OBJECT: "Error\nSorry, camera should not be within an object\n",
}


class SceneError(Exception):
    """Raised when a scene is invalid."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message())
        self.kind = kind