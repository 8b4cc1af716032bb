"""Files of fixed-size binary records addressed by position."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Generic, Iterator, Protocol, Type, TypeVar, Union


class Record(Protocol):
    SIZE: ClassVar[int]

    def to_bytes(self) -> bytes: ...


R = TypeVar("R")


def _encode_text(text: str, size: int) -> bytes:
    """Encode text for a fixed field of ``size`` bytes, leaving room for a NUL."""
    return text.encode("utf-8")[: size - 1]


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


class RecordFile(Generic[R]):
    """A file holding records of one type, each of ``record_type.SIZE`` bytes."""

    def __init__(self, path: Union[str, os.PathLike], record_type: Type[R]) -> None:
        self.path = Path(path)
        self.record_type = record_type

    @property
    def _size(self) -> int:
        return self.record_type.SIZE  # type: ignore[attr-defined]

    def append(self, record: R) -> None:
        """Add a record at the end of the file, creating it if needed."""
        with self.path.open("ab") as stream:
            stream.write(record.to_bytes())  # type: ignore[attr-defined]

    def write(self, record: R, pos: int) -> None:
        """Overwrite the record at ``pos``; the file must already exist."""
        if pos < 0:
            raise ValueError(f"invalid record position: {pos}")
        with self.path.open("r+b") as stream:
            stream.seek(pos * self._size)
            stream.write(record.to_bytes())  # type: ignore[attr-defined]

    def read(self, pos: int) -> R:
        """Return the record at ``pos``, or an empty record if there is none."""
        if pos < 0:
            return self.record_type()
        try:
            with self.path.open("rb") as stream:
                stream.seek(pos * self._size)
                data = stream.read(self._size)
        except FileNotFoundError:
            return self.record_type()
        if len(data) != self._size:
            return self.record_type()
        return self.record_type.from_bytes(data)  # type: ignore[attr-defined]

    def count(self) -> int:
        """Number of whole records in the file; 0 if it does not exist."""
        try:
            return self.path.stat().st_size // self._size
        except FileNotFoundError:
            return 0

    def __iter__(self) -> Iterator[R]:
        try:
            stream = self.path.open("rb")
        except FileNotFoundError:
            return
        with stream:
            while True:
                data = stream.read(self._size)
                if len(data) != self._size:
                    return
                yield self.record_type.from_bytes(data)  # type: ignore[attr-defined]