"""The table of the best five scores and its file format."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

RECORDS_NUMBER = 5
RECORDS_FILE_NAME = "records.records"

# Longest stored name, in bytes.
MAX_NAME_BYTES = 17

# One entry on disk: a flag byte, a NUL-padded 20-byte name, three bytes of
# padding and a 32-bit score.
_RECORD_STRUCT = struct.Struct("=?20s3xi")
_FILE_SIZE = _RECORD_STRUCT.size * RECORDS_NUMBER


@dataclass
class Record:
    """One line of the table."""

    name: str = ""
    score: int = 0
    is_current_player: bool = False


def _empty_entries() -> list[Record]:
    return [Record() for _ in range(RECORDS_NUMBER)]


def _fit_name(name: str) -> str:
    return name.encode("utf-8")[:MAX_NAME_BYTES].decode("utf-8", errors="ignore")


@dataclass
class Records:
    """The best scores, highest first.

    When ``path`` is set, every change is written to that file and read back.
    """

    entries: list[Record] = field(default_factory=_empty_entries)
    path: str | os.PathLike[str] | None = None

    def __iter__(self) -> Iterator[Record]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Record:
        return self.entries[index]

    def reset(self) -> None:
        """Empty every line of the table."""
        self.entries = _empty_entries()

    def add(self, name: str, score: int) -> None:
        """Enter a score; a known name only keeps its best score."""
        if not name:
            return
        name = _fit_name(name)
        known = False
        for record in self.entries:
            if record.name == name:
                if score > record.score:
                    record.score = score
                known = True

        if not known:
            position = RECORDS_NUMBER
            for index in range(RECORDS_NUMBER - 1, -1, -1):
                if score > self.entries[index].score:
                    position = index
                else:
                    break
            if position < RECORDS_NUMBER:
                self.entries.insert(
                    position, Record(name=name, score=score, is_current_player=True)
                )
                del self.entries[RECORDS_NUMBER:]

        self.sort()
        self._persist()

    def remove(self, name: str) -> None:
        """Drop the first line with ``name``; the table closes up."""
        for index, record in enumerate(self.entries):
            if record.name == name:
                del self.entries[index]
                self.entries.append(Record())
                break
        self.sort()
        self._persist()

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the table to ``path``."""
        data = b"".join(
            _RECORD_STRUCT.pack(
                record.is_current_player,
                record.name.encode("utf-8")[: 20 - 1],
                record.score,
            )
            for record in self.entries
        )
        Path(path).write_bytes(data)

    def load(self, path: str | os.PathLike[str]) -> bool:
        """Read the table from ``path``; return False if no full table was there."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            return False
        if len(data) < _FILE_SIZE:
            return False
        self.entries = [
            Record(
                name=raw_name.split(b"\0", 1)[0].decode("utf-8", errors="ignore"),
                score=score,
                is_current_player=flag,
            )
            for flag, raw_name, score in _RECORD_STRUCT.iter_unpack(data[:_FILE_SIZE])
        ]
        return True

    def sort(self) -> None:
        """Order the lines by score, highest first, keeping ties in place."""
        self.entries.sort(key=lambda record: record.score, reverse=True)

    def _persist(self) -> None:
        if self.path is not None:
            self.save(self.path)
            self.load(self.path)