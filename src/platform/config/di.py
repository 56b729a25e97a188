"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.mongo_setting import MongoDatabase
from src.service.ticketing.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.ticketing.driven_adapter.repo.event_repo_impl import EventRepoImpl
from src.service.ticketing.driven_adapter.repo.payment_repo_impl import PaymentRepoImpl
from src.service.ticketing.driven_adapter.repo.user_repo_impl import UserRepoImpl
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth_strategy import (
    RoleAuthStrategy,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (client is created lazily, connected in the app lifespan)
    database = providers.Singleton(MongoDatabase, settings=config_service)

    # Repositories (stateless, share the database handle)
    user_repo = providers.Singleton(UserRepoImpl, database=database)
    event_repo = providers.Singleton(EventRepoImpl, database=database)
    booking_repo = providers.Singleton(BookingRepoImpl, database=database)
    payment_repo = providers.Singleton(PaymentRepoImpl, database=database)

    # Auth
    jwt_auth = providers.Singleton(JwtAuth)
    role_auth_strategy = providers.Singleton(RoleAuthStrategy, user_repo=user_repo)


container = Container()
