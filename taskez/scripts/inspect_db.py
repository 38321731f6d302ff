import asyncio

from sqlalchemy import func
from sqlalchemy.future import select

from taskez.database import AsyncSessionLocal, engine
from taskez.models.tasks import Task
from taskez.models.user import User


async def inspect_users():
    async with AsyncSessionLocal() as db:
        try:
            result = await db.execute(
                select(
                    User.user_id,
                    User.login_key,
                    User.name,
                    func.count(Task.task_id),
                    func.count(Task.task_id).filter(Task.finished == True),  # noqa: E712
                    func.count(Task.task_id).filter(Task.deleted == True),  # noqa: E712
                )
                .outerjoin(Task, Task.owner_id == User.user_id)
                .group_by(User.user_id, User.login_key, User.name)
                .order_by(User.user_id)
            )
            rows = result.all()
            print(f"Found {len(rows)} users:")
            for user_id, login_key, name, total, finished, deleted in rows:
                print(f"ID: {user_id}, Key: '{login_key}', Name: '{name}', "
                      f"tasks: {total} (finished {finished}, deleted {deleted})")
        finally:
            await engine.dispose()

if __name__ == "__main__":
    asyncio.run(inspect_users())
