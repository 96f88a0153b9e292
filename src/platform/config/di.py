"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database, get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.cinema_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_booking_query_repo import (
    InMemoryBookingQueryRepo,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_showtime_query_repo import (
    InMemoryShowtimeQueryRepo,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_store import (
    InMemoryStore,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_unit_of_work import (
    InMemoryUnitOfWork,
)
from src.service.cinema_booking.driven_adapter.repo.showtime_query_repo_impl import (
    ShowtimeQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # In-memory store (STORAGE_BACKEND=memory)
    in_memory_store = providers.Singleton(InMemoryStore)

    # Unit of Work - a fresh one per operation
    unit_of_work = providers.Selector(
        config_service.provided.STORAGE_BACKEND,
        postgres=providers.Factory(
            SqlAlchemyUnitOfWork, session_factory=providers.Callable(get_session_maker)
        ),
        memory=providers.Factory(InMemoryUnitOfWork, store=in_memory_store),
    )

    # Lock-free read repositories
    booking_query_repo = providers.Selector(
        config_service.provided.STORAGE_BACKEND,
        postgres=providers.Singleton(
            BookingQueryRepoImpl, session_factory=database.provided.session
        ),
        memory=providers.Singleton(InMemoryBookingQueryRepo, store=in_memory_store),
    )
    showtime_query_repo = providers.Selector(
        config_service.provided.STORAGE_BACKEND,
        postgres=providers.Singleton(
            ShowtimeQueryRepoImpl, session_factory=database.provided.session
        ),
        memory=providers.Singleton(InMemoryShowtimeQueryRepo, store=in_memory_store),
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
