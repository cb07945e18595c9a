"""Principal directory and password authentication for the trip calculator."""

import hashlib
import hmac
import json
import os
import time
import random
import base64
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import streamlit as st

from core.blob_store import BlobStore
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# Configuration
ITERATIONS = 600_000  # PBKDF2-HMAC-SHA256 (OWASP 2023)
SALT_SIZE = 32        # 32 bytes = 256 bits

USERS_KEY = "transportCalculator_users"
ADMIN_USERNAME = "admin"
SESSION_KEY = "principal"


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class ProtectedPrincipalError(Exception):
    """Raised when deleting the built-in admin principal."""


@dataclass(frozen=True)
class Principal:
    """An authenticated user as seen by the application."""
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def hash_password(password: str, iterations: int = ITERATIONS) -> str:
    """
    Hash a password using PBKDF2-HMAC-SHA256 with a random salt.

    Format: pbkdf2_sha256$iterations$salt_b64$hash_b64
    """
    salt = os.urandom(SALT_SIZE)
    key = hashlib.pbkdf2_hmac(
        'sha256',
        password.encode('utf-8'),
        salt,
        iterations
    )

    salt_b64 = base64.b64encode(salt).decode('ascii')
    key_b64 = base64.b64encode(key).decode('ascii')

    return f"pbkdf2_sha256${iterations}${salt_b64}${key_b64}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against its stored PBKDF2 hash."""
    parts = (stored_hash or "").split('$')
    if len(parts) != 4 or parts[0] != 'pbkdf2_sha256':
        return False

    try:
        iterations = int(parts[1])
        salt = base64.b64decode(parts[2])
        expected_key = base64.b64decode(parts[3])
    except ValueError:
        return False

    derived_key = hashlib.pbkdf2_hmac(
        'sha256',
        password.encode('utf-8'),
        salt,
        iterations
    )

    # Constant time comparison
    return hmac.compare_digest(derived_key, expected_key)


class UserDirectory:
    """
    Principals stored as one JSON document in the blob store.

    The directory always contains the admin principal: it is seeded on
    first use and can never be deleted.
    """

    def __init__(self, blob_store: BlobStore, admin_password: str, iterations: int = ITERATIONS):
        self.blob_store = blob_store
        self.iterations = iterations
        self._ensure_admin(admin_password)

    def _load(self) -> List[dict]:
        raw = self.blob_store.read(USERS_KEY)
        if not raw:
            return []
        try:
            users = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"User directory is not valid JSON, resetting to admin only: {e}")
            return []
        if not isinstance(users, list):
            logger.error("User directory is not a list, resetting to admin only")
            return []

        valid = [u for u in users if isinstance(u, dict) and isinstance(u.get("username"), str)]
        if len(valid) < len(users):
            logger.warning(f"Skipped {len(users) - len(valid)} malformed entries in the user directory")
        return valid

    @staticmethod
    def _role(user: dict) -> Optional[Role]:
        try:
            return Role(user.get("role", Role.USER.value))
        except ValueError:
            logger.warning(f"Skipping principal {user['username']} with unknown role {user.get('role')!r}")
            return None

    def _save(self, users: List[dict]) -> None:
        self.blob_store.write(USERS_KEY, json.dumps(users))

    def _ensure_admin(self, admin_password: str) -> None:
        users = self._load()
        if any(u.get("username") == ADMIN_USERNAME for u in users):
            return

        users.insert(0, {
            "username": ADMIN_USERNAME,
            "password_hash": hash_password(admin_password, self.iterations),
            "role": Role.ADMIN.value,
        })
        self._save(users)
        logger.info("User directory seeded with admin principal")

    def list_principals(self) -> List[Principal]:
        principals = []
        for user in self._load():
            role = self._role(user)
            if user["username"] and role is not None:
                principals.append(Principal(username=user["username"], role=role))
        return principals

    def login(self, username: str, password: str) -> Optional[Principal]:
        """Return the principal if the credentials match, else None."""
        for user in self._load():
            if user["username"] == username:
                role = self._role(user)
                if role is not None and verify_password(password, user.get("password_hash", "")):
                    logger.info(f"Login succeeded: {username}")
                    return Principal(username=username, role=role)
                break

        logger.warning(f"Login failed: {username}")
        return None

    def create_principal(self, username: str, password: str, role: Role = Role.USER) -> bool:
        """
        Add a principal.

        Returns:
            False if the username is taken
        """
        users = self._load()
        if any(u.get("username") == username for u in users):
            return False

        users.append({
            "username": username,
            "password_hash": hash_password(password, self.iterations),
            "role": Role(role).value,
        })
        self._save(users)
        logger.info(f"Principal created: {username} ({Role(role).value})")
        return True

    def delete_principal(self, username: str) -> bool:
        """
        Remove a principal.

        Returns:
            True if removed, False if no such principal

        Raises:
            ProtectedPrincipalError: For the built-in admin
        """
        if username == ADMIN_USERNAME:
            raise ProtectedPrincipalError("The admin account cannot be deleted")

        users = self._load()
        remaining = [u for u in users if u.get("username") != username]
        if len(remaining) == len(users):
            return False

        self._save(remaining)
        logger.info(f"Principal deleted: {username}")
        return True


def current_principal() -> Optional[Principal]:
    """The principal of this Streamlit session, if logged in."""
    return st.session_state.get(SESSION_KEY)


def check_authentication(directory: UserDirectory, title: str = "LOGIN",
                         username_label: str = "Username", password_label: str = "Password",
                         button_label: str = "LOG IN", error_message: str = "Invalid username or password") -> Optional[Principal]:
    """
    Gate the calculator behind a login form.

    Returns:
        The logged-in principal, or None while the form is shown
    """
    principal = current_principal()
    if principal is not None:
        return principal

    col1, col2, col3 = st.columns([1, 2, 1])

    with col2:
        with st.container(border=True):
            st.markdown(f'<div style="text-align: center; margin-bottom: 20px;">🚚 {title}</div>', unsafe_allow_html=True)
            username = st.text_input(username_label, key="login_username")
            password = st.text_input(password_label, type="password", key="login_password")
            login_button = st.button(button_label, type="primary", use_container_width=True)

    if login_button:
        principal = directory.login(username, password)
        if principal is not None:
            st.session_state[SESSION_KEY] = principal
            st.rerun()
        else:
            # Slow down brute forcing via the UI
            time.sleep(1.0 + random.random())
            st.error(error_message)

    return None


def logout():
    """Log out the current principal."""
    st.session_state.pop(SESSION_KEY, None)
    st.rerun()


def show_logout_button(label: str = "🚪 Logout"):
    """Display logout button in sidebar."""
    with st.sidebar:
        st.divider()
        if st.button(label, help="Log out of the application"):
            logout()
