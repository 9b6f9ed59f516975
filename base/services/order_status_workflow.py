import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.conf import settings
from django.utils import timezone

from base.constants import Constants
from base.exceptions import ConcurrencyConflict, InvalidTransition, NotFound, PersistenceError, ValidationError
from base.models import OrderHistoryModel
from base.services.row_source import DjangoRowSource

logger = logging.getLogger(__name__)


@dataclass
class EditStatusViewModel:
    orderId: int
    customerId: int
    currentStatus: Optional[str]
    statuses: List = field(default_factory=list)


class OrderStatusWorkflow:
    """
    Applies status changes to orders.

    The current status lives in a single field on the order and is overwritten;
    every successful change also appends one immutable OrderHistoryModel row.
    Both writes share a unit of work.
    """

    def __init__(self, row_source=None, selectable_below=None):
        self.row_source = row_source or DjangoRowSource()
        if selectable_below is None:
            selectable_below = getattr(settings, "ORDER_STATUS_SELECTABLE_BELOW", Constants.ORDER_STATUS_SELECTABLE_BELOW)
        self.selectable_below = selectable_below

    def is_selectable(self, status_id):
        return status_id < self.selectable_below

    def selectable_statuses(self):
        return [status for status in self.row_source.list_order_statuses() if self.is_selectable(status.id)]

    def current_status_text(self, order):
        """StatusValue of the order's current status, or None when unset or unknown."""
        if order.currentStatus_id is None:
            return None
        status = self.row_source.get_order_status(order.currentStatus_id)
        return status.statusValue if status else None

    def describe(self, order_id):
        """
        Build the edit-status view model for an order.

        Raises:
            NotFound: If the order does not exist.
        """
        order = self.row_source.get_order(order_id)
        if order is None:
            raise NotFound(f"Order {order_id} does not exist")

        return EditStatusViewModel(
            orderId=order.id,
            customerId=order.customer_id,
            currentStatus=self.current_status_text(order),
            statuses=self.row_source.list_order_statuses(),
        )

    def apply_status_change(self, order_id, new_status_id):
        """
        Move an order to a new status and record it in the order history.

        Args:
            order_id (int):      Order to change.
            new_status_id (int): Target status id, must be below the selectable threshold.

        Returns:
            OrderHistoryModel: The history row that was appended.

        Raises:
            NotFound:          If the order does not exist (or vanished mid-update).
            InvalidTransition: If the target status is not selectable. Nothing is written.
            ValidationError:   If the target status is not in the catalog. Nothing is written.
            PersistenceError:  If the unit of work could not be committed.
        """
        order = self.row_source.get_order(order_id)
        if order is None:
            raise NotFound(f"Order {order_id} does not exist")

        if not self.is_selectable(new_status_id):
            logger.warning(f"Rejected status change of order {order_id} to {new_status_id}")
            raise InvalidTransition(
                f"Cannot change status to a value of {self.selectable_below} or higher",
                field="newStatusId"
            )

        status = self.row_source.get_order_status(new_status_id)
        if status is None:
            raise ValidationError(f"Order status {new_status_id} does not exist", field="newStatusId")

        order.currentStatus = status
        history = OrderHistoryModel(order=order, status=status, statusDate=timezone.now())

        try:
            with self.row_source.unit_of_work():
                self.row_source.update_order(order, ["currentStatus"])
                self.row_source.append_history(history)
        except ConcurrencyConflict:
            if not self.row_source.order_exists(order_id):
                raise NotFound(f"Order {order_id} does not exist")
            raise
        except PersistenceError as e:
            logger.error(f"Failed to save status change for order {order_id}: {e.message}", exc_info=True)
            raise PersistenceError(Constants.Messages.STATUS_SAVE_FAILED) from e

        logger.info(f"Order {order_id} moved to status {new_status_id} (history {history.id})")
        return history
