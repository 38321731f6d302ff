import asyncio

from taskez.database import create_tables, engine


async def init_db():
    print(f"Creating tables on {engine.url.render_as_string(hide_password=True)}")
    try:
        await create_tables()
        print("Done.")
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(init_db())
