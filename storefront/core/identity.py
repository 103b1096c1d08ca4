"""Stable per-user fingerprint used to scope saved addresses and orders.

The SHA-256 of the user's SSH public key blob is preferred (same input as
``ssh-keygen -lf``); without a key, ``<user>@<home>`` is hashed instead.
"""
from __future__ import annotations

import base64
import binascii
import getpass
import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SSH_KEY_FILES = ("id_ed25519.pub", "id_rsa.pub", "id_ecdsa.pub")
SHORT_ID_LENGTH = 8


@dataclass(frozen=True, slots=True)
class UserIdentity:
    fingerprint: str
    short_id: str

    @classmethod
    def from_digest(cls, data: bytes) -> UserIdentity:
        fingerprint = hashlib.sha256(data).hexdigest()
        return cls(fingerprint=fingerprint, short_id=fingerprint[:SHORT_ID_LENGTH])

    @classmethod
    def from_key_file(cls, path: Path) -> UserIdentity | None:
        """Parse ``type base64-key comment`` and hash the decoded key."""
        try:
            content = path.read_text(encoding="utf-8")
        except OSError:
            return None

        parts = content.strip().split()
        if len(parts) < 2:
            return None
        try:
            key_data = base64.b64decode(parts[1], validate=True)
        except (binascii.Error, ValueError):
            logger.debug("Unreadable SSH key in %s", path)
            return None
        return cls.from_digest(key_data)

    @classmethod
    def from_ssh_key(cls, home: Path | None = None) -> UserIdentity | None:
        ssh_dir = (home or Path.home()) / ".ssh"
        for name in SSH_KEY_FILES:
            identity = cls.from_key_file(ssh_dir / name)
            if identity is not None:
                return identity
        return None

    @classmethod
    def fallback(cls, home: Path | None = None) -> UserIdentity:
        try:
            username = getpass.getuser()
        except (KeyError, OSError):
            username = "anonymous"
        home_path = str(home or Path.home())
        return cls.from_digest(f"{username}@{home_path}".encode())

    @classmethod
    def get_or_create(cls, home: Path | None = None) -> UserIdentity:
        identity = cls.from_ssh_key(home)
        if identity is None:
            logger.info("No SSH public key found, using machine fallback identity")
            return cls.fallback(home)
        return identity
