from django.db import models

from .order_model import OrderModel

class OrderLineModel(models.Model):
    """
    Model that represents a book sold in an order
    """
    id = models.AutoField(primary_key=True, db_column="lineId")
    order = models.ForeignKey(OrderModel, on_delete=models.PROTECT, db_column="orderId", related_name="lines")
    bookId = models.IntegerField(null=True, blank=True)
    price = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = "orderLine"
