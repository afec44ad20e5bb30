"""Transient status flags with set/guaranteed-clear discipline."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum


class StatusFlag(str, Enum):
    COMPOSING = "composing"
    GENERATING_IMAGE = "generating_image"
    UPLOADING_FILE = "uploading_file"


@dataclass(frozen=True, slots=True)
class StatusSnapshot:
    composing: bool
    generating_image: bool
    uploading_file: bool
    upload_error: str | None


class TransientStatus:
    """Reference-counted boolean flags plus the last upload error.

    A flag reads true while at least one holder is inside :meth:`hold`, so a nested
    hold of the same flag only clears when the outermost holder exits.
    """

    def __init__(self) -> None:
        self._holders: Counter[StatusFlag] = Counter()
        self.upload_error: str | None = None

    @contextmanager
    def hold(self, flag: StatusFlag) -> Iterator[None]:
        self._holders[flag] += 1
        try:
            yield
        finally:
            self._holders[flag] -= 1
            if self._holders[flag] <= 0:
                del self._holders[flag]

    def is_set(self, flag: StatusFlag) -> bool:
        return self._holders[flag] > 0

    @property
    def composing(self) -> bool:
        return self.is_set(StatusFlag.COMPOSING)

    def snapshot(self) -> StatusSnapshot:
        return StatusSnapshot(
            composing=self.is_set(StatusFlag.COMPOSING),
            generating_image=self.is_set(StatusFlag.GENERATING_IMAGE),
            uploading_file=self.is_set(StatusFlag.UPLOADING_FILE),
            upload_error=self.upload_error,
        )
