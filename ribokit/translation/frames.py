from enum import Enum
from typing import Union


class ReadingFrame(Enum):
    """Forward reading frames: how many nucleotides precede the first codon."""

    FIRST = 0
    SECOND = 1
    THIRD = 2

    @property
    def offset(self) -> int:
        return self.value

    @classmethod
    def of(cls, frame: Union["ReadingFrame", int]) -> "ReadingFrame":
        """Accept a ReadingFrame or a plain offset 0, 1 or 2."""
        if isinstance(frame, cls):
            return frame
        if isinstance(frame, int) and not isinstance(frame, bool):
            try:
                return cls(frame)
            except ValueError:
                pass
        raise ValueError(f"Invalid reading frame: {frame!r}. Valid: 0, 1, 2")
