"""
Row source consumed by the core services.

The aggregation, status workflow and cascading delete never touch the ORM
directly; they go through a RowSource so the storage can be swapped (or made
to fail) without changing their logic.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import NamedTuple

from django.db import DatabaseError, transaction
from django.db.models import CharField, Count, F, IntegerField, OuterRef, Subquery, Value
from django.db.models.functions import Coalesce

from base.constants import Constants
from base.exceptions import ConcurrencyConflict, PersistenceError
from base.models import (
    CustomerAddressModel,
    CustomerModel,
    OrderHistoryModel,
    OrderLineModel,
    OrderModel,
    OrderStatusModel,
)

logger = logging.getLogger(__name__)


class CustomerJoinRow(NamedTuple):
    """ One row of the customer -> address -> country join, with the customer's order count """
    customerId: int
    firstName: str
    lastName: str
    email: str
    countryName: str
    orderCount: int


class RowSource(ABC):
    """
    Storage operations the core needs. Batch removals return the number of rows removed.
    """

    @abstractmethod
    def list_customer_join_rows(self):
        """Full denormalized join, one row per customer/address link, no paging."""

    @abstractmethod
    def customer_exists(self, customer_id):
        ...

    @abstractmethod
    def get_order(self, order_id):
        """Return the order or None."""

    @abstractmethod
    def order_exists(self, order_id):
        ...

    @abstractmethod
    def list_order_ids_for_customer(self, customer_id):
        ...

    @abstractmethod
    def list_order_statuses(self):
        ...

    @abstractmethod
    def get_order_status(self, status_id):
        """Return the catalog entry or None."""

    @abstractmethod
    def append_history(self, entry):
        ...

    @abstractmethod
    def update_order(self, order, fields):
        """Persist `fields` of `order`. Raises ConcurrencyConflict if the row is gone."""

    @abstractmethod
    def remove_order_histories_by_order_ids(self, order_ids):
        ...

    @abstractmethod
    def remove_order_lines_by_order_ids(self, order_ids):
        ...

    @abstractmethod
    def remove_orders(self, order_ids):
        ...

    @abstractmethod
    def remove_customer_addresses(self, customer_id):
        ...

    @abstractmethod
    def remove_customer(self, customer_id):
        ...

    @abstractmethod
    def unit_of_work(self):
        """Context manager; everything done inside commits together on a clean exit."""


class DjangoRowSource(RowSource):
    """ RowSource backed by the Django ORM and the default database """

    def list_customer_join_rows(self):
        order_counts = (
            OrderModel.objects.filter(customer=OuterRef("pk"))
            .order_by()
            .values("customer")
            .annotate(total=Count("pk"))
            .values("total")
        )
        rows = (
            CustomerModel.objects
            .annotate(
                linkId=F("customer_addresses__id"),
                countryName=Coalesce(
                    F("customer_addresses__address__country__countryName"),
                    Value(Constants.UNKNOWN_COUNTRY),
                    output_field=CharField(),
                ),
                orderCount=Coalesce(
                    Subquery(order_counts, output_field=IntegerField()),
                    Value(0),
                    output_field=IntegerField(),
                ),
            )
            # Oldest address link first so the chosen country is stable across calls
            .order_by("id", "linkId")
            .values_list("id", "firstName", "lastName", "email", "countryName", "orderCount")
        )
        return [CustomerJoinRow._make(row) for row in rows]

    def customer_exists(self, customer_id):
        return CustomerModel.objects.filter(id=customer_id).exists()

    def get_order(self, order_id):
        return OrderModel.objects.filter(id=order_id).first()

    def order_exists(self, order_id):
        return OrderModel.objects.filter(id=order_id).exists()

    def list_order_ids_for_customer(self, customer_id):
        return list(OrderModel.objects.filter(customer_id=customer_id).values_list("id", flat=True))

    def list_order_statuses(self):
        return list(OrderStatusModel.objects.order_by("id"))

    def get_order_status(self, status_id):
        return OrderStatusModel.objects.filter(id=status_id).first()

    def append_history(self, entry):
        try:
            entry.save()
        except DatabaseError as e:
            raise PersistenceError(f"Failed to append history for order {entry.order_id}: {e}") from e
        return entry

    def update_order(self, order, fields):
        values = {field: getattr(order, field) for field in fields}
        try:
            updated = OrderModel.objects.filter(pk=order.pk).update(**values)
        except DatabaseError as e:
            raise PersistenceError(f"Failed to update order {order.pk}: {e}") from e
        if updated == 0:
            raise ConcurrencyConflict(f"Order {order.pk} was not updated")

    def remove_order_histories_by_order_ids(self, order_ids):
        return OrderHistoryModel.objects.filter(order_id__in=order_ids).delete()[0]

    def remove_order_lines_by_order_ids(self, order_ids):
        return OrderLineModel.objects.filter(order_id__in=order_ids).delete()[0]

    def remove_orders(self, order_ids):
        return OrderModel.objects.filter(id__in=order_ids).delete()[0]

    def remove_customer_addresses(self, customer_id):
        return CustomerAddressModel.objects.filter(customer_id=customer_id).delete()[0]

    def remove_customer(self, customer_id):
        return CustomerModel.objects.filter(id=customer_id).delete()[0]

    @contextmanager
    def unit_of_work(self):
        try:
            with transaction.atomic():
                yield
        except DatabaseError as e:
            logger.error(f"Unit of work rolled back: {e}")
            raise PersistenceError(str(e)) from e
