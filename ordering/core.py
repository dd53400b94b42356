from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from ordering.application.ordering.use_cases.orders.add_order_item_use_case import (
    AddOrderItemUseCase,
)
from ordering.application.ordering.use_cases.orders.cancel_order_use_case import (
    CancelOrderUseCase,
)
from ordering.application.ordering.use_cases.orders.confirm_order_use_case import (
    ConfirmOrderUseCase,
)
from ordering.application.ordering.use_cases.orders.create_order_use_case import (
    CreateOrderUseCase,
)
from ordering.application.ordering.use_cases.orders.get_order_use_case import GetOrderUseCase
from ordering.application.ordering.use_cases.orders.ship_order_use_case import ShipOrderUseCase
from ordering.config import Settings, get_settings
from ordering.infrastructure.ordering.events import InMemoryEventPublisher
from ordering.infrastructure.ordering.repositories import (
    InMemoryOrderRepository,
    SqlAlchemyOrderRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    sqlalchemy_order_repository = providers.Factory(SqlAlchemyOrderRepository, db=db)
    order_repository = providers.Selector(
        config.persistence_backend,
        sqlalchemy=sqlalchemy_order_repository,
        memory=providers.ThreadSafeSingleton(InMemoryOrderRepository),
    )

    # Event delivery
    event_publisher = providers.ThreadSafeSingleton(InMemoryEventPublisher)

    # Ordering module, application use cases
    create_order_use_case = providers.Factory(
        CreateOrderUseCase,
        order_repository=order_repository,
        event_publisher=event_publisher,
    )
    add_order_item_use_case = providers.Factory(
        AddOrderItemUseCase,
        order_repository=order_repository,
        event_publisher=event_publisher,
    )
    confirm_order_use_case = providers.Factory(
        ConfirmOrderUseCase,
        order_repository=order_repository,
        event_publisher=event_publisher,
    )
    ship_order_use_case = providers.Factory(
        ShipOrderUseCase,
        order_repository=order_repository,
        event_publisher=event_publisher,
    )
    cancel_order_use_case = providers.Factory(
        CancelOrderUseCase,
        order_repository=order_repository,
        event_publisher=event_publisher,
    )
    get_order_use_case = providers.Factory(
        GetOrderUseCase,
        order_repository=order_repository,
    )


def build_container(settings: Settings | None = None) -> Container:
    """Create a container configured from settings."""
    settings = settings or get_settings()
    container = Container()
    container.config.from_dict({"persistence_backend": settings.PERSISTENCE_BACKEND})
    return container
