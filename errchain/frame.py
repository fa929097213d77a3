import dataclasses
from dataclasses import dataclass
from typing import Iterable, List

from errchain.location import Location


@dataclass(frozen=True)
class Frame:
    """
    One layer's recorded context. `code` is 0 when no code applies. `depth`
    is assigned by the owning error when the frame enters its history and is
    otherwise 0.
    """

    message: str
    code: int
    file: str
    line: int
    function: str
    depth: int = 0

    @staticmethod
    def at(message: str, code: int, location: Location) -> "Frame":
        return Frame(
            message, code, location.file(), location.line(), location.function()
        )

    def location(self) -> Location:
        return Location(self.file, self.line, self.function)

    def with_message(self, message: str) -> "Frame":
        return dataclasses.replace(self, message=message)

    def with_depth(self, depth: int) -> "Frame":
        return dataclasses.replace(self, depth=depth)


def format_frame(frame: Frame) -> str:
    text = f"{frame.file}:{frame.line} | {frame.function}() | "
    if frame.code != 0:
        text += f"[code={frame.code}] "
    return text + frame.message


def normalize_depth(frames: Iterable[Frame]) -> List[Frame]:
    """
    Number the given frames 1..N in order, discarding whatever depth they
    carried before.
    """
    return [frame.with_depth(i) for i, frame in enumerate(frames, 1)]
