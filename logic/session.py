import asyncio
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable
from pydantic import ValidationError
from constants import DEMO_USERS, SESSION_STORAGE_KEY
from database.models import User, utc_now
from enums import UserRoleEnum
from logic.errors import AuthenticationError

logger = logging.getLogger(__name__)

class SessionStorage: #durable key-value slot in a JSON file, values are strings like browser local storage
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except ValueError: #bad JSON or bytes that are not UTF-8
            logger.warning("Session file %s is corrupt, discarding it", self.path)
            self.path.unlink(missing_ok=True)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

@dataclass
class UserSession: #explicit session from AuthService.login or restore, there is no module-level current user
    user: User
    started_at: datetime = field(default_factory=utc_now)

    @property
    def is_admin(self) -> bool:
        return self.user.role == UserRoleEnum.admin

class AuthService:
    def __init__(
        self,
        storage: SessionStorage,
        users: list[dict] | None = None,
        latency: float = 0.0,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.storage = storage
        self.users = [User.model_validate(user) for user in (users if users is not None else DEMO_USERS)]
        self.latency = latency
        self.clock = clock

    async def login(self, email: str, password: str) -> UserSession:
        await self._simulate_latency()
        user = self._find_user(email)
        if user is None:
            logger.warning("Login failed for %s", email)
            raise AuthenticationError("Invalid email or password")
        #demo accounts accept any password

        logged_in_user = user.model_copy(update={"last_login": self.clock()})
        self.storage.set(SESSION_STORAGE_KEY, logged_in_user.model_dump_json())
        logger.info("User %s logged in", logged_in_user.email)
        return UserSession(user=logged_in_user, started_at=self.clock())

    def logout(self) -> None:
        self.storage.remove(SESSION_STORAGE_KEY)
        logger.info("Session cleared")

    def restore(self) -> UserSession | None:
        """Rehydrate the persisted session, if there is a usable one."""
        stored_user = self.storage.get(SESSION_STORAGE_KEY)
        if stored_user is None:
            return None
        try:
            user = User.model_validate_json(stored_user)
        except ValidationError: #covers malformed JSON as well as a record with the wrong shape
            logger.warning("Discarding unreadable stored session")
            self.storage.remove(SESSION_STORAGE_KEY)
            return None
        return UserSession(user=user, started_at=self.clock())

    async def forgot_password(self, email: str) -> None:
        await self._simulate_latency()
        if self._find_user(email) is None:
            raise AuthenticationError("No account found with this email")
        logger.info("Password reset requested for %s", email) #delivering the reset email is out of scope

    async def reset_password(self, token: str, password: str) -> None:
        await self._simulate_latency()
        if not token.strip():
            raise AuthenticationError("Invalid or expired reset link")
        if not password:
            raise AuthenticationError("Password is required")
        logger.info("Password reset completed")

    def _find_user(self, email: str) -> User | None:
        email = email.strip().lower()
        return next((user for user in self.users if user.email.lower() == email), None)

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
