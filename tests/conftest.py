"""
Pytest configuration and fixtures.
"""
import pytest
from rest_framework.test import APIClient

from base.enums import ADDRESS_STATUS, ORDER_STATUS
from base.models import (
    AddressModel,
    AddressStatusModel,
    CountryModel,
    CustomerAddressModel,
    CustomerModel,
    OrderHistoryModel,
    OrderLineModel,
    OrderModel,
    OrderStatusModel,
)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def order_statuses(db):
    """The seeded order status catalog, keyed by id."""
    return {
        status.value: OrderStatusModel.objects.create(id=status.value, statusValue=status.label)
        for status in ORDER_STATUS
    }


@pytest.fixture
def active_status(db):
    return AddressStatusModel.objects.create(id=ADDRESS_STATUS.ACTIVE.value, addressStatus="Active")


@pytest.fixture
def countries(db):
    return {
        name: CountryModel.objects.create(countryName=name)
        for name in ("United States of America", "United Kingdom", "Australia")
    }


@pytest.fixture
def make_customer(db, active_status):
    """Create a customer, optionally linked to addresses in the given countries (in link order)."""
    def _make(first_name, last_name, email=None, countries=()):
        customer = CustomerModel(firstName=first_name, lastName=last_name, email=email or f"{first_name.lower()}@example.com")
        customer.save(force_insert=True)
        for country in countries:
            address = AddressModel.objects.create(streetNumber="1", streetName="Main St", city="Town", country=country)
            CustomerAddressModel.objects.create(customer=customer, address=address, status=active_status)
        return customer
    return _make


@pytest.fixture
def make_order(db):
    """Create an order with `lines` order lines and one history row per status in `history`."""
    def _make(customer, status=None, lines=1, history=()):
        order = OrderModel.objects.create(customer=customer, currentStatus=status)
        for i in range(lines):
            OrderLineModel.objects.create(order=order, bookId=100 + i, price=9.99)
        for entry_status in history:
            OrderHistoryModel(order=order, status=entry_status).save()
        return order
    return _make
