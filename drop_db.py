import asyncio
import os
import sys

sys.path.append(os.getcwd())

from plates.db.base import Base, drop_database
from plates.db.session import engine


async def drop_tables():
    await drop_database(engine)
    print(f"Dropped tables: {', '.join(sorted(Base.metadata.tables))}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
