from datetime import datetime

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from taskez.errors import InvalidInput, NotFound
from taskez.models.tasks import Task
from taskez.models.user import User
from taskez.services.base import Store
from taskez.utils.sanitization import to_naive_utc


def _require(**fields):
    missing = [
        name for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise InvalidInput(f"Missing required field(s): {', '.join(missing)}")


def _require_ids(task_id, owner_id):
    _require(task_id=task_id, owner_id=owner_id)
    # bool is an int subclass but never a valid id
    for name, value in (("task_id", task_id), ("owner_id", owner_id)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"{name} must be an integer")


class TaskStore(Store):
    """
    Owner-scoped task persistence.

    Every mutation is a single UPDATE whose WHERE clause carries the
    ownership and lifecycle guard, followed by a re-read of the row inside
    the same transaction. A guard that matches nothing is reported as
    NotFound, so "never existed", "belongs to someone else" and "wrong
    state" look the same to the caller.
    """

    async def _get(self, db: AsyncSession, task_id: int, owner_id: int) -> Task:
        result = await db.execute(
            select(Task)
            .filter(Task.task_id == task_id, Task.owner_id == owner_id)
            .execution_options(populate_existing=True)
        )
        task = result.scalars().first()
        if not task:
            raise NotFound("Task not found")
        return task

    async def _guarded_update(self, db: AsyncSession, task_id: int, owner_id: int, guards: tuple, **values) -> Task:
        result = await db.execute(
            update(Task)
            .where(Task.task_id == task_id, Task.owner_id == owner_id, *guards)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFound("Task not found")
        return await self._get(db, task_id, owner_id)

    async def list_tasks(self, owner_id: int) -> list[Task]:
        _require(owner_id=owner_id)
        async with self._transaction() as db:
            result = await db.execute(
                select(Task).filter(Task.owner_id == owner_id).order_by(Task.task_id)
            )
            return list(result.scalars().all())

    async def search_tasks(self, owner_id: int, title_fragment: str | None) -> list[Task]:
        _require(owner_id=owner_id)
        query = select(Task).filter(Task.owner_id == owner_id)
        if title_fragment:
            query = query.filter(Task.title.contains(title_fragment, autoescape=True))
        async with self._transaction() as db:
            result = await db.execute(query.order_by(Task.task_id))
            return list(result.scalars().all())

    async def save_task(
        self,
        owner_id: int,
        title: str,
        start_at: datetime,
        end_at: datetime,
        color: str,
        content: str | None = "",
        task_id: int | None = None,
    ) -> tuple[Task, bool]:
        """
        Create when task_id is absent or non-positive, otherwise edit.

        Editing also clears finished and deleted, so an edited task is
        always live again. start_at is not checked against end_at.

        Returns (task, created).
        """
        _require(owner_id=owner_id, title=title, start_at=start_at, end_at=end_at, color=color)
        content = content or ""
        start_at, end_at = to_naive_utc(start_at), to_naive_utc(end_at)

        async with self._transaction() as db:
            if task_id is None or task_id <= 0:
                owner = await db.get(User, owner_id)
                if not owner:
                    raise NotFound("User not found")

                new_task = Task(
                    owner_id=owner_id,
                    title=title,
                    content=content,
                    start_date=start_at,
                    end_date=end_at,
                    color=color,
                    finished=False,
                    deleted=False,
                )
                db.add(new_task)
                await db.flush()
                return await self._get(db, new_task.task_id, owner_id), True

            task = await self._guarded_update(
                db, task_id, owner_id, (),
                title=title,
                content=content,
                start_date=start_at,
                end_date=end_at,
                color=color,
                finished=False,
                deleted=False,
            )
            return task, False

    async def delete_task(self, task_id: int, owner_id: int) -> Task:
        _require(task_id=task_id, owner_id=owner_id)
        async with self._transaction() as db:
            return await self._guarded_update(
                db, task_id, owner_id, (Task.deleted == False,),  # noqa: E712
                deleted=True,
            )

    async def finish_task(self, task_id: int, owner_id: int) -> Task:
        _require_ids(task_id, owner_id)
        async with self._transaction() as db:
            return await self._guarded_update(
                db, task_id, owner_id, (Task.deleted == False, Task.finished == False),  # noqa: E712
                finished=True,
            )
