"""
Customer create/edit flows used by the customer screens.
"""
import logging

from django.db import DatabaseError, transaction

from base.constants import Constants
from base.enums import ADDRESS_STATUS
from base.exceptions import ConcurrencyConflict, NotFound, PersistenceError, ValidationError
from base.models import (
    AddressModel,
    AddressStatusModel,
    CountryModel,
    CustomerAddressModel,
    CustomerModel,
    OrderModel,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for creating and editing customers and their address link."""

    @staticmethod
    def _require_country(country_id):
        if country_id in (None, ""):
            raise ValidationError(Constants.Messages.COUNTRY_REQUIRED, field="countryId")
        try:
            return CountryModel.objects.get(id=country_id)
        except (CountryModel.DoesNotExist, ValueError, TypeError):
            raise NotFound(f"Country {country_id} does not exist")

    @staticmethod
    def _link_address(customer, country, address_data=None):
        """
        Link the customer to an address in `country`, reusing an identical
        address record when one already exists.
        """
        address_data = address_data or {}
        address, _ = AddressModel.objects.get_or_create(
            country=country,
            streetNumber=address_data.get("streetNumber") or "",
            streetName=address_data.get("streetName") or "",
            city=address_data.get("city") or "",
        )
        active, _ = AddressStatusModel.objects.get_or_create(
            id=ADDRESS_STATUS.ACTIVE.value,
            defaults={"addressStatus": ADDRESS_STATUS.ACTIVE.name.title()}
        )
        return CustomerAddressModel.objects.create(customer=customer, address=address, status=active)

    @staticmethod
    def create_customer(first_name, last_name, email, country_id, address_data=None):
        """
        Creates a customer with the next free id and links it to an address in the chosen country.

        Args:
            first_name (str), last_name (str), email (str): Customer details.
            country_id (int): Selected country, required.
            address_data (dict): Optional streetNumber/streetName/city.

        Returns:
            CustomerModel: The created customer.

        Raises:
            ValidationError: If no country was selected.
            NotFound: If the country does not exist.
            PersistenceError: If the customer could not be saved.
        """
        country = CustomerService._require_country(country_id)

        try:
            with transaction.atomic():
                customer = CustomerModel(firstName=first_name, lastName=last_name, email=email)
                customer.save(force_insert=True)
                CustomerService._link_address(customer, country, address_data)
        except DatabaseError as e:
            logger.error(f"Failed to create customer {email}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to create customer: {e}") from e

        logger.info(f"Created customer {customer.id} in {country.countryName}")
        return customer

    @staticmethod
    def update_customer(customer_id, data, country_id, address_data=None):
        """
        Updates a customer's details and replaces its address link.
        The old link is removed and the new one inserted in the same transaction,
        so a failure never leaves the customer without an address.

        Raises:
            ValidationError: If no country was selected.
            NotFound: If the customer or the country does not exist.
            PersistenceError: If the changes could not be saved.
        """
        country = CustomerService._require_country(country_id)
        fields = {key: data[key] for key in ("firstName", "lastName", "email") if key in data}

        try:
            with transaction.atomic():
                updated = CustomerModel.objects.filter(id=customer_id).update(**fields) if fields else 1
                if updated == 0:
                    raise ConcurrencyConflict(f"Customer {customer_id} was not updated")
                customer = CustomerModel.objects.get(id=customer_id)

                CustomerAddressModel.objects.filter(customer=customer).delete()
                CustomerService._link_address(customer, country, address_data)
        except ConcurrencyConflict:
            if not CustomerModel.objects.filter(id=customer_id).exists():
                raise NotFound(f"Customer {customer_id} does not exist")
            raise
        except CustomerModel.DoesNotExist:
            raise NotFound(f"Customer {customer_id} does not exist")
        except DatabaseError as e:
            logger.error(f"Failed to update customer {customer_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to update customer: {e}") from e

        logger.info(f"Updated customer {customer_id}, country now {country.countryName}")
        return customer

    @staticmethod
    def get_customer_country(customer_id):
        """Country of the customer's oldest address link, or None."""
        link = (
            CustomerAddressModel.objects
            .filter(customer_id=customer_id)
            .select_related("address__country")
            .order_by("id")
            .first()
        )
        return link.address.country if link else None

    @staticmethod
    def list_customer_orders(customer_id):
        """
        Raises:
            NotFound: If the customer does not exist.
        """
        if not CustomerModel.objects.filter(id=customer_id).exists():
            raise NotFound(f"Customer {customer_id} does not exist")

        return list(
            OrderModel.objects
            .filter(customer_id=customer_id)
            .select_related("currentStatus")
            .order_by("orderDate", "id")
        )
