#!/usr/bin/env python3
"""
Credentials and configuration for the ConnectBox API

Handles password hashing, the environment variable configuration and the
on-disk credential store. The router only ever sees the SHA-256 hex digest
of the password, so that digest is all this module keeps: the plaintext
is hashed once and dropped.
"""

import hashlib
import json
import logging
import os
import stat
from pathlib import Path
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

# Default credentials file location
DEFAULT_CREDENTIALS_FILE = Path.home() / ".connectbox"

DEFAULT_ADDRESS = "192.168.0.1"
DEFAULT_USERNAME = "admin"
DEFAULT_TIMEOUT = 10.0


class Credentials(NamedTuple):
    """Address, username and hashed password of one router"""
    address: str
    username: str
    password_hash: str


class EnvConfig(NamedTuple):
    """Client settings read from the environment"""
    address: str
    username: str
    password: str
    timeout: float


def hash_password(password: str) -> str:
    """Return the hex-encoded SHA-256 digest sent as the login password"""
    return hashlib.sha256(password.encode()).hexdigest()


def load_env_config() -> EnvConfig:
    """
    Read client settings from environment variables

    Environment variables:
        CONNECTBOX_ADDRESS: Router address (default: 192.168.0.1)
        CONNECTBOX_USERNAME: Username (default: admin)
        CONNECTBOX_PASSWORD: Password (required)
        CONNECTBOX_TIMEOUT: Request timeout in seconds (default: 10)

    Returns:
        EnvConfig tuple

    Raises:
        ValueError: If the password is missing or the timeout is not a number
    """
    password = os.getenv('CONNECTBOX_PASSWORD')
    if not password:
        raise ValueError("CONNECTBOX_PASSWORD is not set")

    timeout = os.getenv('CONNECTBOX_TIMEOUT')
    try:
        timeout_value = float(timeout) if timeout else DEFAULT_TIMEOUT
    except ValueError:
        raise ValueError(f"Invalid CONNECTBOX_TIMEOUT: {timeout}") from None

    return EnvConfig(
        address=os.getenv('CONNECTBOX_ADDRESS') or DEFAULT_ADDRESS,
        username=os.getenv('CONNECTBOX_USERNAME') or DEFAULT_USERNAME,
        password=password,
        timeout=timeout_value,
    )


class CredentialStore:
    """Manages storage of router credentials with a hashed password"""

    def __init__(self, credentials_file: Optional[Path] = None):
        """
        Initialize credential store

        Args:
            credentials_file: Path to credentials file (default: ~/.connectbox)
        """
        self.credentials_file = Path(credentials_file or DEFAULT_CREDENTIALS_FILE)

    def save(self, credentials: Credentials) -> bool:
        """
        Save credentials to file with permissions 600

        Args:
            credentials: Address, username and password hash

        Returns:
            True if saved successfully
        """
        try:
            with open(self.credentials_file, 'w') as f:
                json.dump(credentials._asdict(), f, indent=2)

            # rw for user only
            os.chmod(self.credentials_file, stat.S_IRUSR | stat.S_IWUSR)
            return True
        except OSError as e:
            logger.warning("Could not save credentials to %s: %s", self.credentials_file, e)
            return False

    def load(self) -> Optional[Credentials]:
        """
        Load credentials from file

        Returns:
            Credentials, or None if the file is missing or unreadable
        """
        if not self.credentials_file.exists():
            return None

        file_stat = os.stat(self.credentials_file)
        if file_stat.st_mode & 0o077:
            logger.warning("%s has insecure permissions, run: chmod 600 %s",
                           self.credentials_file, self.credentials_file)

        try:
            with open(self.credentials_file, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read credentials from %s: %s", self.credentials_file, e)
            return None

        if not isinstance(data, dict) or not all(data.get(key) for key in Credentials._fields):
            logger.warning("Incomplete credentials in %s", self.credentials_file)
            return None

        return Credentials(
            address=data['address'],
            username=data['username'],
            password_hash=data['password_hash'],
        )

    def delete(self) -> bool:
        """Delete saved credentials file"""
        try:
            if self.credentials_file.exists():
                self.credentials_file.unlink()
                return True
        except OSError as e:
            logger.warning("Could not delete credentials: %s", e)
        return False

    def exists(self) -> bool:
        """Check if credentials file exists"""
        return self.credentials_file.exists()
