"""Use case for shipping an order."""

import structlog

from ordering.application.common.cancellation import CancellationSignal
from ordering.application.common.command import CommandHandler
from ordering.application.ordering.mappers import OrderResponseMapper
from ordering.application.ordering.protocols import (
    EventPublisherProtocol,
    OrderRepositoryProtocol,
)
from ordering.application.ordering.use_cases.dtos import OrderResponse, ShipOrderCommand
from ordering.application.ordering.use_cases.order_workflow import (
    load_order,
    parse_id,
    persist_and_publish,
)
from ordering.domain.common.value_objects import OrderId

logger = structlog.get_logger(__name__)


class ShipOrderUseCase(CommandHandler[ShipOrderCommand, OrderResponse]):
    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.order_repository = order_repository
        self.event_publisher = event_publisher
        self.response_mapper = OrderResponseMapper()

    def handle(
        self, command: ShipOrderCommand, cancel: CancellationSignal | None = None
    ) -> OrderResponse:
        """Ship a confirmed order."""
        order_id = parse_id(OrderId, command.order_id, "order_id")

        order = load_order(self.order_repository, order_id)
        order.ship()
        saved = persist_and_publish(
            order, self.order_repository, self.event_publisher, cancel, "ship order"
        )

        logger.info("order_shipped", order_id=str(order_id), version=saved.version)
        return self.response_mapper.to_response(saved)
