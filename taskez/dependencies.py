from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from taskez.database import AsyncSessionLocal
from taskez.services.tasks import TaskStore
from taskez.services.users import UserStore


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return AsyncSessionLocal


def get_task_store(sessionmaker: async_sessionmaker[AsyncSession] = Depends(get_sessionmaker)) -> TaskStore:
    return TaskStore(sessionmaker)


def get_user_store(sessionmaker: async_sessionmaker[AsyncSession] = Depends(get_sessionmaker)) -> UserStore:
    return UserStore(sessionmaker)
