#!/usr/bin/env python3
"""
Database Seed Script
Populate initial data into MongoDB

Features:
1. Create Users - an admin and a guest (roles are never self-assigned over HTTP,
   so this is how the first admin comes to exist)
2. Create Events - a few events with ticket inventory

Usage:
    python -m script.seed_data
    ADMIN_EMAIL=me@example.com python -m script.seed_data
"""

import asyncio
import os
from dataclasses import dataclass

from src.platform.config.di import container
from src.platform.exception.exceptions import ConflictError
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole


@dataclass
class UserConfig:
    """User seed configuration"""
    email: str
    name: str
    role: UserRole


# Users to create
SEED_USERS = [
    UserConfig(email=os.getenv('ADMIN_EMAIL', 'admin@bookmyevent.dev'), name='init admin', role=UserRole.ADMIN),
    UserConfig(email='guest@bookmyevent.dev', name='init guest', role=UserRole.GUEST),
]

# Events to create
SEED_EVENTS = [
    {
        'title': 'Dhaka Jazz Night',
        'image': 'https://images.bookmyevent.dev/jazz.jpg',
        'tickets': {'available': 250},
        'location': 'Bashundhara Convention Center',
        'price': 1500,
    },
    {
        'title': 'Tech Summit',
        'image': 'https://images.bookmyevent.dev/summit.jpg',
        'tickets': {'available': 500},
        'location': 'ICCB Hall 4',
        'price': 800,
    },
]


async def create_users() -> None:
    print(f'👥 Creating {len(SEED_USERS)} users...')
    user_repo = container.user_repo()

    for config in SEED_USERS:
        user = UserEntity(email=config.email, role=config.role, profile={'name': config.name})
        try:
            created = await user_repo.create(user=user)
            print(f'   ✅ Created {config.role.value}: ID={created.id}, Email={created.email}')
        except ConflictError:
            print(f'   ⏭️  {config.email} already exists, skipped')


async def create_events() -> None:
    print(f'🎫 Creating {len(SEED_EVENTS)} events...')
    use_case = CreateEventUseCase(event_repo=container.event_repo())

    for event in SEED_EVENTS:
        details = {k: v for k, v in event.items() if k not in ('title', 'image', 'tickets')}
        event_id = await use_case.create_event(
            title=event['title'],
            image=event['image'],
            tickets=event['tickets'],
            details=details,
        )
        print(f'   ✅ Created event: ID={event_id}, Title={event["title"]}')


async def verify_data() -> None:
    print('🔍 Verifying seeded data...')
    users = await container.user_repo().list_all()
    events = await container.event_repo().list_all()
    print(f'   User count: {len(users)}')
    for user in users:
        print(f'      User ID={user.id}, Email={user.email}, Role={user.role.value}')
    print(f'   Event count: {len(events)}')
    for event in events:
        print(f'      Event ID={event.id}, Title={event.title}, Available={event.available}')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    database = container.database()
    try:
        await database.connect()
        await create_users()
        print()
        await create_events()
        print()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise SystemExit(1)
    finally:
        await database.close()


if __name__ == '__main__':
    asyncio.run(main())
