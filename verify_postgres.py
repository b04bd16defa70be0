import asyncio
import asyncpg
import os
import sys
from dotenv import load_dotenv

# Same .env the settings read
load_dotenv(".env")

# asyncpg wants a plain postgresql:// DSN, not the SQLAlchemy dialect form
db_url = os.getenv("DATABASE_URL", "postgresql://root:@localhost:5432/taxibook")
db_url = db_url.replace("+asyncpg", "")

print(f"Testing connection to: {db_url}")


async def check_db():
    try:
        conn = await asyncpg.connect(db_url)
    except (OSError, asyncpg.PostgresError) as e:
        print(f"❌ Connection Failed: {e}")
        return 1

    try:
        for table in ("Customer", "trip"):
            exists = await conn.fetchval("SELECT to_regclass($1) IS NOT NULL", f'"{table}"')
            print(f"{'✅' if exists else '⚠️ '} table {table}: {'present' if exists else 'missing'}")
    finally:
        await conn.close()

    print("✅ Connection Successful!")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(check_db()))
