"""Use case for fetching an order."""

import structlog

from ordering.application.common.cancellation import CancellationSignal, raise_if_cancelled
from ordering.application.common.query import QueryHandler
from ordering.application.ordering.mappers import OrderResponseMapper
from ordering.application.ordering.protocols import OrderRepositoryProtocol
from ordering.application.ordering.use_cases.dtos import GetOrderQuery, OrderResponse
from ordering.application.ordering.use_cases.order_workflow import load_order, parse_id
from ordering.domain.common.value_objects import OrderId

logger = structlog.get_logger(__name__)


class GetOrderUseCase(QueryHandler[GetOrderQuery, OrderResponse]):
    """Use case for fetching a single order. Publishes nothing."""

    def __init__(self, order_repository: OrderRepositoryProtocol) -> None:
        self.order_repository = order_repository
        self.response_mapper = OrderResponseMapper()

    def handle(
        self, query: GetOrderQuery, cancel: CancellationSignal | None = None
    ) -> OrderResponse:
        """
        Get an order by its ID.

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        order_id = parse_id(OrderId, query.order_id, "order_id")
        raise_if_cancelled(cancel, "get order")

        order = load_order(self.order_repository, order_id)
        logger.debug("order_fetched", order_id=str(order_id), status=order.status.value)
        return self.response_mapper.to_response(order)
