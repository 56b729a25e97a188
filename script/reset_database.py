#!/usr/bin/env python3
"""
Database Reset Script
Reset the MongoDB database

Features:
1. Drop Database - completely wipe every collection
2. Recreate Indexes - unique user email and one payment per booking

Notes:
- This script only resets database structure, does not seed test data
- To seed test data, run `python -m script.seed_data`
"""

import asyncio

from src.platform.config.core_setting import settings
from src.platform.config.di import container


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)
    print(f'MongoDB URL: {settings.MONGODB_URL}')
    print(f'Database name: {settings.MONGODB_DB_NAME}')

    database = container.database()
    try:
        print('🗑️ Dropping database...')
        await database.client.drop_database(settings.MONGODB_DB_NAME)
        print(f"   ✅ Database '{settings.MONGODB_DB_NAME}' dropped")

        print('🏗️ Recreating indexes...')
        await database.connect()
        print('   ✅ Indexes created')

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed test data, run: python -m script.seed_data')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        raise SystemExit(1)
    finally:
        await database.close()


if __name__ == '__main__':
    asyncio.run(main())
