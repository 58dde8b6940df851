"""Encryption-at-rest and atomic writes for files holding saved places."""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from cryptography.fernet import Fernet, InvalidToken


class ProtectionError(Exception):
    """Raised when protected data cannot be read with the current key."""


class ProtectionLockedError(ProtectionError):
    """Raised when protected data is accessed while the session is locked."""


def generate_key() -> bytes:
    return Fernet.generate_key()


def atomic_write_bytes(path: Path, data: bytes, mode: int = 0o600) -> None:
    """Write bytes so the file either holds all of data or its previous content.

    The temp file lives in the target directory so os.replace stays on one
    filesystem.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            os.fchmod(f.fileno(), mode)
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def load_or_create_key(key_path: Path) -> bytes:
    """Read the key file, creating an owner-only one on first use."""
    if key_path.exists():
        return key_path.read_bytes().strip()
    key = generate_key()
    atomic_write_bytes(key_path, key)
    print(f"Created new key file: {key_path}")
    return key


class FileProtection:
    """Seal and open file contents with a Fernet key.

    While locked (no key held) neither direction works, which is what keeps
    the saved places unreadable until the user unlocks the session.
    """

    def __init__(self, key: Optional[Union[str, bytes]] = None):
        self._fernet: Optional[Fernet] = None
        if key is not None:
            self.unlock(key)

    @property
    def is_unlocked(self) -> bool:
        return self._fernet is not None

    def unlock(self, key: Union[str, bytes]) -> None:
        """Hold the key for this session.

        Raises:
            ProtectionError: key is not a valid Fernet key
        """
        try:
            if isinstance(key, str):
                key = key.encode("ascii")
            self._fernet = Fernet(key)
        except (ValueError, TypeError) as e:
            raise ProtectionError(f"Invalid key: {e}") from e

    def lock(self) -> None:
        self._fernet = None

    def seal(self, data: bytes) -> bytes:
        if self._fernet is None:
            raise ProtectionLockedError("Places are locked")
        return self._fernet.encrypt(data)

    def open(self, token: bytes) -> bytes:
        if self._fernet is None:
            raise ProtectionLockedError("Places are locked")
        try:
            return self._fernet.decrypt(token)
        except InvalidToken as e:
            raise ProtectionError("Data could not be decrypted with this key") from e

    def write(self, path: Path, data: bytes) -> None:
        """Seal data and write it atomically with owner-only permissions."""
        atomic_write_bytes(path, self.seal(data))

    def read(self, path: Path) -> bytes:
        return self.open(path.read_bytes())
