import threading
from typing import Callable, Optional

from errchain.error import ChainedError
from errchain.location import Location


def make(message: str, code: int = 0, location: Optional[Location] = None) -> ChainedError:
    """
    Create a fresh error, recorded at the caller's location.
    """
    if location is None:
        location = Location.capture()
    return ChainedError(message, code, location=location)


def wrap(
    message: str,
    cause: BaseException,
    code: int = 0,
    location: Optional[Location] = None,
) -> ChainedError:
    """
    Create an error that adds the caller's context to `cause`. A
    `ChainedError` cause has its frames merged into the new error's history;
    any other exception has its description appended to `message`.
    """
    if location is None:
        location = Location.capture()
    return ChainedError(message, code, cause=cause, location=location)


class ErrorSlot:
    """
    Holds at most one error for code that passes errors through an output
    slot instead of raising them at every layer. Whoever holds the slot is its
    only writer; the lock keeps a swap from being observed half-way, it does
    not make the slot a synchronization primitive.
    """

    def __init__(self, error: Optional[ChainedError] = None) -> None:
        self._error = _check_slot_error(error)
        self._lock = threading.Lock()

    def get(self) -> Optional[ChainedError]:
        return self._error

    def is_empty(self) -> bool:
        return self._error is None

    def put(self, error: Optional[ChainedError]):
        error = _check_slot_error(error)
        with self._lock:
            self._error = error

    def take(self) -> Optional[ChainedError]:
        """
        Move the error out of the slot, leaving it empty.
        """
        with self._lock:
            error = self._error
            self._error = None
            return error

    def replace(
        self, extend: Callable[[ChainedError], ChainedError]
    ) -> Optional[ChainedError]:
        """
        Replace the held error with `extend(error)`. Does nothing and returns
        `None` if the slot is empty. If `extend` raises, the slot keeps the
        error it held.
        """
        with self._lock:
            if self._error is None:
                return None

            replacement = _check_slot_error(extend(self._error))
            self._error = replacement
            return replacement

    def raise_if_set(self):
        if self._error is not None:
            raise self._error

    def __bool__(self) -> bool:
        return self._error is not None

    def __repr__(self) -> str:
        return f"ErrorSlot({self._error!r})"


def _check_slot_error(error):
    if error is not None and not isinstance(error, ChainedError):
        raise TypeError(
            f"an ErrorSlot can only hold a ChainedError, not '{type(error).__name__}'"
        )
    return error


def safe_chain(
    slot: Optional[ErrorSlot],
    message: str,
    code: int = 0,
    location: Optional[Location] = None,
) -> Optional[ChainedError]:
    """
    Add the caller's context to the error held in `slot`, in place. Returns
    the extended error, or `None` without touching anything if there is no
    error to chain onto.
    """
    if slot is None or slot.is_empty():
        return None

    if location is None:
        location = Location.capture()

    def extend(lower: ChainedError) -> ChainedError:
        upper = ChainedError(message, code, location=location)
        upper.append_exception(lower)
        upper.__cause__ = lower
        return upper

    return slot.replace(extend)
