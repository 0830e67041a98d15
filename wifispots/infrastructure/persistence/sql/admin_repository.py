import logging

from wifispots.core.ports import AdminRepository, DataAccessPort

logger = logging.getLogger(__name__)


class SqlAdminRepository(AdminRepository):
    def __init__(self, db: DataAccessPort):
        self.db = db

    def exists(self, username: str) -> bool:
        count = self.db.execute_scalar(
            "SELECT COUNT(*) FROM admins WHERE username = :u", {"u": username}
        )
        return int(count or 0) > 0

    def add(self, username: str, password_hash: str) -> None:
        self.db.execute_command(
            "INSERT INTO admins (username, password) VALUES (:u, :p)",
            {"u": username, "p": password_hash},
        )
        logger.info(f"Registered admin {username!r}")

    def get_password_hash(self, username: str) -> str | None:
        return self.db.execute_scalar(
            "SELECT password FROM admins WHERE username = :u", {"u": username}
        )
