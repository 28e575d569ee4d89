"""JSON file login session storage.

Writes go to a temporary file in the same directory which then replaces the
target, so readers never observe a partially written record. File I/O runs
in a worker thread to keep the event loop free.
"""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from profile_auth.exceptions import ProfileAuthError
from profile_auth.interfaces.storage import ILoginResponseStore
from profile_auth.messages import LoginResponse


class StorageError(ProfileAuthError):
    """Exception raised when a stored session cannot be read."""

    pass


class FileLoginResponseStore(ILoginResponseStore):
    """Login session storage backed by a JSON file.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    async def get_login_response(self) -> Optional[LoginResponse]:
        """Read the stored session.

        Returns:
            The stored session, or None if the file does not exist.

        Raises:
            StorageError: If the file exists but does not hold a session.
        """
        return await asyncio.to_thread(self._read)

    async def set_login_response(self, value: LoginResponse) -> None:
        """Atomically replace the stored session.

        Args:
            value: The session to store.
        """
        await asyncio.to_thread(self._write, value.to_dict())

    def _read(self) -> Optional[LoginResponse]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

        try:
            return LoginResponse.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            raise StorageError(f"corrupt session file: {self.path}") from e

    def _write(self, record: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(record, handle, separators=(",", ":"))
            os.replace(temp_path, self.path)
        except BaseException:
            os.unlink(temp_path)
            raise
