from django.db import models

from .customer_model import CustomerModel
from .address_model import AddressModel
from .address_status_model import AddressStatusModel

class CustomerAddressModel(models.Model):
    """
    Links Customers to AddressModel entries.
    The admin screens keep at most one link per customer.
    """
    id = models.AutoField(primary_key=True)
    customer = models.ForeignKey(
        CustomerModel,
        on_delete=models.PROTECT,
        related_name="customer_addresses",
        db_column="customerId"
    )
    address = models.ForeignKey(
        AddressModel,
        on_delete=models.PROTECT,
        related_name="address_customers",
        db_column="addressId"
    )
    status = models.ForeignKey(
        AddressStatusModel,
        on_delete=models.PROTECT,
        db_column="statusId"
    )

    class Meta:
        db_table = "customerAddress"
        unique_together = [("customer", "address")]

    def __str__(self):
        return f"{self.customer} -> {self.address}"
