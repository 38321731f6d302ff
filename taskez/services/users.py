from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from taskez.errors import Conflict, NotFound, StoreFailure
from taskez.models.user import User
from taskez.services.base import Store
from taskez.utils.security import hash_password, verify_password


class UserStore(Store):
    """Registration and credential lookup."""

    async def _by_login_key(self, db: AsyncSession, login_key: str) -> User | None:
        result = await db.execute(select(User).filter(User.login_key == login_key))
        return result.scalars().first()

    async def register(self, login_key: str, password: str, name: str) -> User:
        password_hash = hash_password(password)
        try:
            async with self._transaction() as db:
                if await self._by_login_key(db, login_key):
                    raise Conflict("This ID is already registered")
                new_user = User(
                    login_key=login_key,
                    password_hash=password_hash,
                    name=name,
                )
                db.add(new_user)
                await db.flush()
        except StoreFailure as e:
            # Lost the race against a concurrent registration
            if isinstance(e.__cause__, IntegrityError):
                raise Conflict("This ID is already registered") from e
            raise
        print(f"[AUTH] Registered user {new_user.user_id} ({login_key})")
        return new_user

    async def authenticate(self, login_key: str, password: str) -> User:
        async with self._transaction() as db:
            user = await self._by_login_key(db, login_key)
        if not user or not verify_password(password, user.password_hash):
            raise NotFound("Invalid ID or password", status_code=401)
        return user

    async def get_by_login_key(self, login_key: str) -> User:
        async with self._transaction() as db:
            user = await self._by_login_key(db, login_key)
        if not user:
            raise NotFound("User not found")
        return user

    async def get_by_id(self, user_id: int) -> User:
        async with self._transaction() as db:
            user = await db.get(User, user_id)
        if not user:
            raise NotFound("User not found")
        return user
