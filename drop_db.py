import asyncio

from sqlalchemy import text

from app.core.config import get_settings
from app.db.base import Base
from app.db.session import Database
from app.models import *  # noqa: F401, F403 - register all models


async def drop_tables():
    print("Dropping all tables...")
    database = Database(get_settings().async_database_url)
    database.connect()
    async with database.engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await database.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
