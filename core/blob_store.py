"""
Key-Value Blob Store

Storage medium behind the trip history and the user directory. Values are
opaque strings (JSON documents) addressed by a fixed logical key.

Backends:
- SQLiteBlobStore: single-table SQLite database, optionally encrypted at
  rest with Fernet (AES-128-CBC + HMAC)
- MemoryBlobStore: process-local dict, for tests and throwaway sessions

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import sqlite3
import base64
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from cryptography.fernet import Fernet, InvalidToken

from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class BlobDecryptionError(Exception):
    """Raised when a stored blob cannot be decrypted with the configured key."""


class EncryptionManager:
    """Encrypts and decrypts blob values."""

    def __init__(self, key: str):
        """
        Args:
            key: Base64-encoded Fernet key
        """
        if isinstance(key, str):
            key = key.encode()
        self.cipher = Fernet(key)

    def encrypt(self, data: Optional[str]) -> Optional[str]:
        """Encrypt string data, return base64 encoded cipher text."""
        if data is None:
            return None
        encrypted = self.cipher.encrypt(data.encode())
        return base64.b64encode(encrypted).decode()

    def decrypt(self, encrypted_data: Optional[str]) -> Optional[str]:
        """
        Decrypt base64 encoded cipher text.

        Raises:
            BlobDecryptionError: If the data was not produced with this key
        """
        if encrypted_data is None:
            return None
        try:
            decoded = base64.b64decode(encrypted_data.encode())
            return self.cipher.decrypt(decoded).decode()
        except (InvalidToken, ValueError) as e:
            raise BlobDecryptionError(f"Could not decrypt blob: {e}") from e


class BlobStore(ABC):
    """Abstract key-value store of string blobs."""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if there is none."""
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key. Returns whether a value was removed."""
        pass


class MemoryBlobStore(BlobStore):
    """In-memory blob store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._blobs: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def write(self, key: str, value: str) -> None:
        self._blobs[key] = value

    def delete(self, key: str) -> bool:
        return self._blobs.pop(key, None) is not None


class SQLiteBlobStore(BlobStore):
    """
    Blob store on a single SQLite table.

    Each write replaces the whole value in one statement; SQLite makes the
    replacement atomic.
    """

    def __init__(self, db_path: str = "data/trip_calculator.db", encryption_key: Optional[str] = None):
        """
        Initialize the blob store.

        Args:
            db_path: Path to SQLite database file
            encryption_key: Optional Fernet key; values are stored in clear text without one
        """
        self.db_path = db_path
        self.encryption = EncryptionManager(encryption_key) if encryption_key else None

        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_database()

        logger.info(f"SQLiteBlobStore initialized ({'encrypted' if self.encryption else 'plain'}): {db_path}")

    def _get_conn(self) -> sqlite3.Connection:
        """Get database connection."""
        conn = sqlite3.connect(self.db_path, timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_database(self):
        """Create the blobs table if it doesn't exist."""
        with self._get_conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS blobs (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    encrypted INTEGER NOT NULL DEFAULT 0,
                    updated_at TIMESTAMP NOT NULL
                )
            """)
            conn.commit()

    def read(self, key: str) -> Optional[str]:
        """
        Read a blob.

        Raises:
            BlobDecryptionError: If the blob is encrypted and cannot be decrypted
        """
        with self._get_conn() as conn:
            row = conn.execute(
                "SELECT value, encrypted FROM blobs WHERE key = ?",
                (key,)
            ).fetchone()

        if row is None:
            return None

        if row['encrypted']:
            if self.encryption is None:
                raise BlobDecryptionError(f"Blob '{key}' is encrypted but no encryption key is configured")
            return self.encryption.decrypt(row['value'])

        return row['value']

    def write(self, key: str, value: str) -> None:
        stored = self.encryption.encrypt(value) if self.encryption else value

        with self._get_conn() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO blobs (key, value, encrypted, updated_at) VALUES (?, ?, ?, ?)",
                (key, stored, 1 if self.encryption else 0, datetime.now().isoformat())
            )
            conn.commit()

        logger.debug(f"Blob written: {key} ({len(value)} chars)")

    def delete(self, key: str) -> bool:
        with self._get_conn() as conn:
            cursor = conn.execute("DELETE FROM blobs WHERE key = ?", (key,))
            deleted = cursor.rowcount
            conn.commit()
        return deleted > 0
