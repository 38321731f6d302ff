from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from taskez.config import settings


def async_database_url(url: str) -> str:
    # Ensure we use the async driver
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return url


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    url = async_database_url(url)
    if url.startswith("sqlite"):
        # SQLite has no server-side pool to size
        return create_async_engine(url, echo=echo)
    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


engine = build_engine(settings.database_url, echo=settings.DB_ECHO)

# Async session factory
AsyncSessionLocal = build_sessionmaker(engine)

Base = declarative_base()


async def create_tables(bind: AsyncEngine = engine):
    # Register models on Base.metadata before create_all
    import taskez.models.user  # noqa: F401
    import taskez.models.tasks  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
