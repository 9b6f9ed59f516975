"""
Tests for creating and editing customers and their address link.
"""
import pytest

from api.services import CustomerService
from base.exceptions import NotFound, ValidationError
from base.models import CustomerAddressModel, CustomerModel


@pytest.mark.django_db
def test_create_assigns_next_id_and_links_country(make_customer, countries, active_status):
    make_customer("Existing", "Customer")
    country = countries["Australia"]

    customer = CustomerService.create_customer("New", "Reader", "new@example.com", country.id)

    assert customer.id == 2
    assert CustomerService.get_customer_country(customer.id) == country


@pytest.mark.django_db
@pytest.mark.parametrize("country_id", [None, ""])
def test_create_requires_a_country(country_id):
    with pytest.raises(ValidationError) as exc_info:
        CustomerService.create_customer("No", "Country", "nc@example.com", country_id)

    assert exc_info.value.message == "Please select a country."
    assert exc_info.value.field == "countryId"
    assert not CustomerModel.objects.exists()


@pytest.mark.django_db
def test_create_with_unknown_country_is_not_found():
    with pytest.raises(NotFound):
        CustomerService.create_customer("No", "Country", "nc@example.com", 404)


@pytest.mark.django_db
def test_update_replaces_address_link(make_customer, countries):
    customer = make_customer("Old", "Name", countries=[countries["United Kingdom"]])

    CustomerService.update_customer(customer.id, {"firstName": "New"}, countries["Australia"].id)

    customer.refresh_from_db()
    assert customer.firstName == "New"
    links = CustomerAddressModel.objects.filter(customer=customer)
    assert links.count() == 1
    assert links.get().address.country == countries["Australia"]


@pytest.mark.django_db
def test_update_missing_customer_is_not_found(countries):
    with pytest.raises(NotFound):
        CustomerService.update_customer(999, {"firstName": "Ghost"}, countries["Australia"].id)


@pytest.mark.django_db
def test_update_requires_a_country_and_changes_nothing(make_customer, countries):
    customer = make_customer("Keep", "Me", countries=[countries["United Kingdom"]])

    with pytest.raises(ValidationError):
        CustomerService.update_customer(customer.id, {"firstName": "Changed"}, None)

    customer.refresh_from_db()
    assert customer.firstName == "Keep"
    assert CustomerService.get_customer_country(customer.id) == countries["United Kingdom"]


@pytest.mark.django_db
def test_list_customer_orders(make_customer, make_order):
    customer = make_customer("Has", "Orders")
    first = make_order(customer)
    second = make_order(customer)

    assert [order.id for order in CustomerService.list_customer_orders(customer.id)] == [first.id, second.id]


@pytest.mark.django_db
def test_list_orders_of_missing_customer_is_not_found():
    with pytest.raises(NotFound):
        CustomerService.list_customer_orders(12345)
