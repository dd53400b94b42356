"""Use case for placing a new order."""

import structlog

from ordering.application.common.cancellation import CancellationSignal
from ordering.application.common.command import CommandHandler
from ordering.application.ordering.mappers import OrderResponseMapper
from ordering.application.ordering.protocols import (
    EventPublisherProtocol,
    OrderRepositoryProtocol,
)
from ordering.application.ordering.use_cases.dtos import CreateOrderCommand, OrderResponse
from ordering.application.ordering.use_cases.order_workflow import (
    build_order_item,
    parse_id,
    persist_and_publish,
)
from ordering.domain.common.value_objects import CustomerId, OrderId
from ordering.domain.ordering.entities.order import Order
from ordering.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class CreateOrderUseCase(CommandHandler[CreateOrderCommand, OrderResponse]):
    """Use case for placing a new order."""

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
        self, command: CreateOrderCommand, cancel: CancellationSignal | None = None
    ) -> OrderResponse:
        """
        Create an order for a customer.

        Args:
            command: Customer ID, the requested items and an optional order ID
            cancel: Optional cancellation signal

        Returns:
            The created order

        Raises:
            ValidationError: If the command has the wrong shape
            InvariantViolationError: If items are empty, non-positive or mix currencies
            ConcurrencyConflictError: If an order with the same ID already exists
        """
        if not isinstance(command.items, list | tuple):
            raise ValidationError("items must be a list", field="items")

        customer_id = parse_id(CustomerId, command.customer_id, "customer_id")
        order_id = (
            parse_id(OrderId, command.order_id, "order_id")
            if command.order_id is not None
            else None
        )
        items = [build_order_item(item) for item in command.items]

        order = Order.create(customer_id=customer_id, items=items, order_id=order_id)
        saved = persist_and_publish(
            order, self.order_repository, self.event_publisher, cancel, "create order"
        )

        logger.info(
            "order_created",
            order_id=str(saved.id),
            customer_id=str(customer_id),
            total=str(saved.total()),
        )
        return self.response_mapper.to_response(saved)
