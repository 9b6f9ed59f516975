import logging

from base.constants import Constants
from base.exceptions import DeletionError, NotFound, PersistenceError
from base.services.row_source import DjangoRowSource

logger = logging.getLogger(__name__)


class CustomerDeleter:
    """
    Removes a customer together with everything that depends on it, leaves first:
    order history, order lines, orders, address links, then the customer row.
    """

    def __init__(self, row_source=None):
        self.row_source = row_source or DjangoRowSource()

    def delete_customer(self, customer_id):
        """
        Returns:
            dict: Number of rows removed per step.

        Raises:
            NotFound:      If the customer does not exist. Nothing is removed.
            DeletionError: If the removals could not be committed. Nothing is reported as removed.
        """
        if not self.row_source.customer_exists(customer_id):
            raise NotFound(f"Customer {customer_id} does not exist")

        try:
            with self.row_source.unit_of_work():
                order_ids = self.row_source.list_order_ids_for_customer(customer_id)
                removed = {
                    "histories": self.row_source.remove_order_histories_by_order_ids(order_ids),
                    "lines": self.row_source.remove_order_lines_by_order_ids(order_ids),
                    "orders": self.row_source.remove_orders(order_ids),
                    "addresses": self.row_source.remove_customer_addresses(customer_id),
                    "customers": self.row_source.remove_customer(customer_id),
                }
                if removed["customers"] == 0:
                    # Removed by someone else after the existence check
                    raise NotFound(f"Customer {customer_id} does not exist")
        except PersistenceError as e:
            logger.error(f"Failed to delete customer {customer_id}: {e}", exc_info=True)
            raise DeletionError(Constants.Messages.DELETE_FAILED) from e

        logger.info(f"Deleted customer {customer_id}: {removed}")
        return removed
