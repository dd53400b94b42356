"""Use case for adding an item to an order."""

import structlog

from ordering.application.common.cancellation import CancellationSignal
from ordering.application.common.command import CommandHandler
from ordering.application.ordering.mappers import OrderResponseMapper
from ordering.application.ordering.protocols import (
    EventPublisherProtocol,
    OrderRepositoryProtocol,
)
from ordering.application.ordering.use_cases.dtos import AddOrderItemCommand, OrderResponse
from ordering.application.ordering.use_cases.order_workflow import (
    build_order_item,
    load_order,
    parse_id,
    persist_and_publish,
)
from ordering.domain.common.value_objects import OrderId

logger = structlog.get_logger(__name__)


class AddOrderItemUseCase(CommandHandler[AddOrderItemCommand, OrderResponse]):
    """Use case for adding an item to an order."""

    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with repository and publisher protocols."""
        self.order_repository = order_repository
        self.event_publisher = event_publisher
        self.response_mapper = OrderResponseMapper()

    def handle(
        self, command: AddOrderItemCommand, cancel: CancellationSignal | None = None
    ) -> OrderResponse:
        """
        Add a line to an order that has not been confirmed yet.

        Raises:
            OrderNotFoundError: If the order does not exist
            InvalidStateTransitionError: If the order is no longer Created
            InvariantViolationError: If the item is invalid or in another currency
        """
        order_id = parse_id(OrderId, command.order_id, "order_id")
        item = build_order_item(command.item)

        order = load_order(self.order_repository, order_id)
        order.add_item(item)
        saved = persist_and_publish(
            order, self.order_repository, self.event_publisher, cancel, "add order item"
        )

        logger.info(
            "order_item_added",
            order_id=str(order_id),
            product_id=str(item.product_id),
            quantity=item.quantity,
        )
        return self.response_mapper.to_response(saved)
