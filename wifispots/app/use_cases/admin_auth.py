from __future__ import annotations

import logging

from wifispots.core.errors import ValidationError
from wifispots.core.ports import AdminRepository
from wifispots.core.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


class AdminAuthUseCase:
    def __init__(self, repo: AdminRepository, username: str = "admin", password: str = "admin"):
        self.repo = repo
        self.username = username
        self.password = password

    def login(self, username: str, password: str) -> bool:
        if username == self.username and password == self.password:
            return True
        stored = self.repo.get_password_hash(username)
        ok = stored is not None and verify_password(password, stored)
        if not ok:
            logger.warning(f"Failed admin login for {username!r}")
        return ok

    def register(self, username: str, password: str, confirm: str) -> None:
        username = (username or "").strip()
        password = (password or "").strip()
        confirm = (confirm or "").strip()
        if not username or not password:
            raise ValidationError("Enter a username and password.")
        if password != confirm:
            raise ValidationError("Passwords do not match.")
        if self.repo.exists(username):
            raise ValidationError("An administrator with this username already exists.")
        self.repo.add(username, hash_password(password))
