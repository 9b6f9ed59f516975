from django.db import models
from django.utils import timezone

from .customer_model import CustomerModel
from .order_status_model import OrderStatusModel
from .shipping_method_model import ShippingMethodModel

class OrderModel(models.Model):
    """
    Model that represents a customer's order.
    currentStatus is the only stored pointer to the order's present state; the full
    trail lives in OrderHistoryModel.
    """
    id = models.AutoField(primary_key=True, db_column="orderId")
    orderDate = models.DateTimeField(default=timezone.now)
    customer = models.ForeignKey(
        CustomerModel,
        on_delete=models.PROTECT,
        db_column="customerId",
        related_name="orders"
    )
    shippingMethod = models.ForeignKey(
        ShippingMethodModel,
        on_delete=models.PROTECT,
        db_column="shippingMethodId",
        null=True,
        blank=True
    )
    currentStatus = models.ForeignKey(
        OrderStatusModel,
        on_delete=models.PROTECT,
        db_column="currentStatusId",
        null=True,
        blank=True,
        related_name="current_orders"
    )

    class Meta:
        db_table = "custOrder"
