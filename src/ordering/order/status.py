"""Order status updates: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_reference = String(required=True, max_length=50)
    status = String(required=True, max_length=50)


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.find_by_reference(command.order_reference)
        order.change_status(command.status)
        repo.add(order)
        return order.order_reference
