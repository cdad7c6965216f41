"""Cross-platform file locking.

The trace ledger and the intent map are shared by every agent process
working in a workspace. Writers serialize on an advisory lock file in the
sidecar directory (fcntl on POSIX, msvcrt on Windows).
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Final

from intent_hooks.config.paths import get_lock_path

logger = logging.getLogger(__name__)

# Platform detection
IS_WINDOWS: Final[bool] = sys.platform == "win32"


def acquire_file_lock(file_handle: IO[Any], blocking: bool = False) -> bool:
    """Acquire an exclusive lock on a file.

    Args:
        file_handle: Open file handle to lock.
        blocking: If True, block until lock is acquired. If False, fail immediately
                  if lock is not available.

    Returns:
        True if lock was acquired, False if non-blocking and lock unavailable.

    Raises:
        OSError: If blocking=True and lock cannot be acquired, or other I/O errors.
    """
    if IS_WINDOWS:
        import msvcrt

        try:
            lock_mode = msvcrt.LK_LOCK if blocking else msvcrt.LK_NBLCK  # type: ignore[attr-defined]
            file_handle.seek(0)
            msvcrt.locking(file_handle.fileno(), lock_mode, 1)  # type: ignore[attr-defined]
            return True
        except OSError:
            if not blocking:
                return False
            raise
    else:
        import fcntl

        try:
            flags = fcntl.LOCK_EX
            if not blocking:
                flags |= fcntl.LOCK_NB
            fcntl.flock(file_handle, flags)
            return True
        except OSError:
            if not blocking:
                return False
            raise


def release_file_lock(file_handle: IO[Any]) -> None:
    """Release a file lock. No-op if the file was not locked."""
    if IS_WINDOWS:
        import msvcrt

        try:
            file_handle.seek(0)
            msvcrt.locking(file_handle.fileno(), msvcrt.LK_UNLCK, 1)  # type: ignore[attr-defined]
        except OSError as e:
            logger.debug(f"Failed to release Windows file lock: {e}")
    else:
        import fcntl

        try:
            fcntl.flock(file_handle, fcntl.LOCK_UN)
        except OSError as e:
            logger.debug(f"Failed to release POSIX file lock: {e}")


@contextmanager
def workspace_lock(workspace_root: Path) -> Iterator[None]:
    """Hold the exclusive per-workspace write lock for the duration of the block.

    Creates the sidecar directory and lock file as needed. Blocks until the
    lock is available.

    Raises:
        OSError: If the lock file cannot be created or locked.
    """
    lock_path = get_lock_path(workspace_root)
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    with open(lock_path, "a+", encoding="utf-8") as handle:
        acquire_file_lock(handle, blocking=True)
        try:
            yield
        finally:
            release_file_lock(handle)
