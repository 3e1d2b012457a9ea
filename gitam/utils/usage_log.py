import os
from collections import Counter
from pathlib import Path
from typing import IO

from gitam.utils.classes import RankEntry
from gitam.utils.config import TOP_ALIAS_COUNT
from gitam.utils.errors import LogWriteError, RotationArchiveError


class UsageLog:
    """
    Manages the alias usage log and its rotation archive.

    The log holds one alias name per line in invocation order. It only
    shrinks through rotation, which archives a top-5 summary before
    truncating. No locking is done; concurrent gam runs may interleave.
    """

    def __init__(self, path: Path, archive_path: Path):
        self.path: Path = Path(path)
        self.archive_path: Path = Path(archive_path)
        self._handle: IO[str] | None = None

    # --- Lifecycle ---
    def open(self) -> "UsageLog":
        """Creates the log file if needed and opens it for appending."""
        if self._handle is None:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._handle = open(self.path, "a", encoding="utf-8")
            except OSError as e:
                raise LogWriteError(f"Could not open usage log '{self.path}': {e}") from e
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "UsageLog":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Records ---
    def append(self, name: str) -> None:
        """Appends one alias name, flushed to disk before returning."""
        handle = self.open()._handle
        try:
            handle.write(f"{name}\n")
            handle.flush()
            os.fsync(handle.fileno())
        except OSError as e:
            raise LogWriteError(f"Could not write to usage log '{self.path}': {e}") from e

    def read_names(self) -> list[str]:
        """Returns all recorded alias names, oldest first. Undecodable bytes become U+FFFD."""
        if not self.path.exists():
            return []
        with open(self.path, "r", encoding="utf-8", errors="replace") as f:
            return [line.strip() for line in f if line.strip()]

    def rank_top(self, n: int) -> list[RankEntry]:
        """
        Returns the n most used aliases, highest count first.

        Equal counts keep the order in which the names first appear in
        the log.
        """
        if n <= 0:
            return []
        counts = Counter(self.read_names())
        return [RankEntry(name=name, count=count) for name, count in counts.most_common(n)]

    # --- Rotation ---
    def size_bytes(self) -> int:
        return self.path.stat().st_size if self.path.exists() else 0

    def rotate_if_needed(self, max_size_kb: int) -> bool:
        """
        Archive a usage summary and empty the log once it exceeds max_size_kb.

        The summary must reach the archive before the log is truncated. If
        the archive cannot be written, RotationArchiveError is raised and the
        log is left as it was.

        Returns
        -------
        bool
            True if the log was rotated.

        """
        if self.size_bytes() <= max_size_kb * 1024:
            return False

        print("Rotating log file...")
        self._archive(self.rank_top(TOP_ALIAS_COUNT))

        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            raise LogWriteError(f"Could not truncate usage log '{self.path}': {e}") from e
        return True

    def _archive(self, ranking: list[RankEntry]) -> None:
        lines = [f"Top {TOP_ALIAS_COUNT} most used aliases before rotation:"]
        lines.extend(f"{entry.name} {entry.count}" for entry in ranking)
        lines.append("---")
        block = "\n".join(lines) + "\n"

        try:
            self.archive_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.archive_path, "a", encoding="utf-8") as f:
                f.write(block)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise RotationArchiveError(f"Could not write rotation archive '{self.archive_path}': {e}") from e
