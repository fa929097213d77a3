from typing import List, Optional, Tuple, Union

from errchain.frame import Frame, format_frame, normalize_depth
from errchain.location import Location


class ChainedError(Exception):
    """
    An error carrying the context of every layer it passed through.

    `current` is the frame of the layer that raised this error. `history`
    holds the frames of older causes, most recent first, and never contains
    `current` itself. The summary is rendered once from `current` and stays
    the same when the history grows later on.

    Wrapping another `ChainedError` flattens its frames into this error's
    history. Wrapping any other exception only amends the message of
    `current`.
    """

    def __init__(
        self,
        message: str = "",
        code: int = 0,
        cause: Optional[BaseException] = None,
        location: Optional[Location] = None,
        stacklevel: int = 1,
    ) -> None:
        if location is None:
            location = Location.capture(stacklevel)

        self._current = Frame.at(message, code, location)
        self._history: List[Frame] = []

        if cause is not None:
            self._wrap(classify(cause))
            self.__cause__ = cause

        self._summary = format_frame(self._current)
        super().__init__(self._summary)

    def _wrap(self, cause: "Cause"):
        if isinstance(cause, ChainAware):
            self._extend_history(cause.error)
        else:
            message = self._current.message
            if message == "":
                message = cause.description
            else:
                message = f"{message}, {cause.description}"
            self._current = self._current.with_message(message)

    def _extend_history(self, other: "ChainedError"):
        self._history.append(other._current)
        self._history.extend(other._history)
        self._history = normalize_depth(self._history)

    def append_exception(self, other: "ChainedError"):
        """
        Append the frames of `other` to the end of this error's history,
        leaving `current` and the summary as they are. Used to merge sibling
        failures rather than to wrap a cause.
        """
        if not isinstance(other, ChainedError):
            raise TypeError(
                f"can only append a ChainedError, not '{type(other).__name__}'"
            )
        if other is self:
            raise ValueError("cannot append a ChainedError to itself")
        self._extend_history(other)

    def current(self) -> Frame:
        return self._current

    def history(self) -> Tuple[Frame, ...]:
        return tuple(self._history)

    def frames(self) -> Tuple[Frame, ...]:
        return (self._current, *self._history)

    def depth(self) -> int:
        return len(self._history)

    def message(self) -> str:
        return self._current.message

    def code(self) -> int:
        return self._current.code

    def file(self) -> str:
        return self._current.file

    def line(self) -> int:
        return self._current.line

    def function(self) -> str:
        return self._current.function

    def location(self) -> Location:
        return self._current.location()

    def summary(self) -> str:
        return self._summary

    def full_chain(self) -> str:
        lines = [self._summary]
        lines.extend(f"    {format_frame(frame)}" for frame in self._history)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self._summary

    def __repr__(self) -> str:
        return f"ChainedError({self._summary!r}, depth={self.depth()})"


class ChainAware:
    def __init__(self, error: ChainedError) -> None:
        self.error = error


class Foreign:
    def __init__(self, description: str) -> None:
        self.description = description


Cause = Union[ChainAware, Foreign]


def classify(exception: BaseException) -> Cause:
    """
    Sort an exception into one of the two kinds of cause. Anything not raised
    through this package only contributes its description; an empty
    description falls back to the exception's type name.
    """
    if isinstance(exception, ChainedError):
        return ChainAware(exception)

    return Foreign(str(exception) or type(exception).__name__)
