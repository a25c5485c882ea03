"""Print how many exercises the configured database holds and one sample id."""

import asyncio

from sqlalchemy import func, select

from app.core.config import get_settings
from app.db.session import Database
from app.models import Exercise


async def check_data():
    settings = get_settings()
    database = Database(settings.async_database_url)
    database.connect()
    try:
        async with database.session_maker() as session:
            count = (await session.execute(select(func.count()).select_from(Exercise))).scalar_one()
            print(f"Table 'exercises' row count: {count}")
            if count > 0:
                sample_id = (await session.execute(select(Exercise.id).limit(1))).scalar_one()
                print(f"  Sample ID: {sample_id} (Type: {type(sample_id)})")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
