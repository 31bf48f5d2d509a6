"""JSON file storage for application users."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import bcrypt

from .records import read_json_list, write_json_list

logger = logging.getLogger(__name__)

# (id, username, password, email, role, department)
DEMO_USERS = [
    (1, 'admin', 'admin123', 'admin@police.gov', 'admin', 'Headquarters'),
    (2, 'officer1', 'officer123', 'officer1@police.gov', 'officer', 'District 1'),
    (3, 'officer2', 'officer123', 'officer2@police.gov', 'officer', 'District 2'),
]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def check_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """User dictionary without the password hash."""
    return {key: value for key, value in user.items() if key != 'password'}


class JsonUserStore:
    """Users persisted to a JSON file with bcrypt password hashes."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_users(self) -> List[Dict[str, Any]]:
        return read_json_list(self.path)

    def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        for user in self.get_users():
            if user.get('username') == username:
                return user
        return None

    def get_user_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        for user in self.get_users():
            if user.get('id') == user_id:
                return user
        return None

    def verify_credentials(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Check a username and password.

        Returns:
            The user without its password hash, or None if rejected
        """
        user = self.get_user(username)
        if user is None or not check_password(password, user.get('password', '')):
            logger.info(f"Rejected login for {username!r}")
            return None
        return public_user(user)

    def seed_demo_users(self) -> List[Dict[str, Any]]:
        """Replace the user file with the demo admin and officer accounts."""
        now = datetime.now(timezone.utc).isoformat()
        users = [
            {
                'id': user_id,
                'username': username,
                'password': hash_password(password),
                'email': email,
                'role': role,
                'department': department,
                'created_at': now,
            }
            for user_id, username, password, email, role, department in DEMO_USERS
        ]
        write_json_list(self.path, users)
        logger.info(f"Seeded {len(users)} demo users into {self.path}")
        return [public_user(user) for user in users]
