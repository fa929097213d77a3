import os
import sys
import traceback
from traceback import FrameSummary

from errchain import settings


class Location:
    """
    A source location: the file, line and function a frame was recorded at.
    """

    def __init__(self, file: str, line: int, function: str) -> None:
        self._file = file
        self._line = line
        self._function = function

    def file(self) -> str:
        return self._file

    def line(self) -> int:
        return self._line

    def function(self) -> str:
        return self._function

    @staticmethod
    def from_frame(frame: FrameSummary) -> "Location":
        filename = frame.filename
        if not settings.settings().full_paths():
            filename = os.path.basename(filename)

        return Location(filename, frame.lineno or -1, frame.name)

    @staticmethod
    def capture(stacklevel: int = 1) -> "Location":
        """
        Capture the location of a caller. With the default `stacklevel` of 1
        this is the caller of the function that calls `capture`, in the same
        way `warnings.warn` counts levels.
        """
        frame = sys._getframe(stacklevel + 1)
        summary = traceback.extract_stack(frame, limit=1)[0]
        return Location.from_frame(summary)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return (self._file, self._line, self._function) == (
            other._file,
            other._line,
            other._function,
        )

    def __hash__(self) -> int:
        return hash((self._file, self._line, self._function))

    def __repr__(self) -> str:
        return f"Location({self._file!r}, {self._line}, {self._function!r})"
