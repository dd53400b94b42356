"""Use case for cancelling an order."""

import structlog

from ordering.application.common.cancellation import CancellationSignal
from ordering.application.common.command import CommandHandler
from ordering.application.ordering.mappers import OrderResponseMapper
from ordering.application.ordering.protocols import (
    EventPublisherProtocol,
    OrderRepositoryProtocol,
)
from ordering.application.ordering.use_cases.dtos import CancelOrderCommand, OrderResponse
from ordering.application.ordering.use_cases.order_workflow import (
    load_order,
    parse_id,
    persist_and_publish,
)
from ordering.domain.common.value_objects import OrderId
from ordering.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class CancelOrderUseCase(CommandHandler[CancelOrderCommand, OrderResponse]):
    """Use case for cancelling an order."""

    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.order_repository = order_repository
        self.event_publisher = event_publisher
        self.response_mapper = OrderResponseMapper()

    def handle(
        self, command: CancelOrderCommand, cancel: CancellationSignal | None = None
    ) -> OrderResponse:
        """
        Cancel an order that has not shipped.

        Args:
            command: Order ID and an optional free-text reason
            cancel: Optional cancellation signal for this request

        Returns:
            The cancelled order

        Raises:
            OrderNotFoundError: If the order does not exist
            InvalidStateTransitionError: If the order is Shipped or already Cancelled
        """
        order_id = parse_id(OrderId, command.order_id, "order_id")
        if command.reason is not None and not isinstance(command.reason, str):
            raise ValidationError("reason must be a string", field="reason")

        order = load_order(self.order_repository, order_id)
        previous_status = order.status
        order.cancel(command.reason)
        saved = persist_and_publish(
            order, self.order_repository, self.event_publisher, cancel, "cancel order"
        )

        logger.info(
            "order_cancelled",
            order_id=str(order_id),
            previous_status=previous_status.value,
            reason=saved.cancellation_reason,
        )
        return self.response_mapper.to_response(saved)
