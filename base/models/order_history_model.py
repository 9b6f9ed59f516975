import uuid

from django.db import models
from django.utils import timezone

from .order_model import OrderModel
from .order_status_model import OrderStatusModel

class OrderHistoryModel(models.Model):
    """
    Append-only audit trail of an order's status changes.
    Rows are written once and never modified; the id is a random UUID so it is
    never reused.
    """
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False, db_column="historyId")
    order = models.ForeignKey(OrderModel, on_delete=models.PROTECT, db_column="orderId", related_name="history")
    status = models.ForeignKey(OrderStatusModel, on_delete=models.PROTECT, db_column="statusId")
    statusDate = models.DateTimeField(default=timezone.now)

    def save(self, *args, **kwargs):
        # Inserts only
        kwargs["force_insert"] = True
        kwargs.pop("force_update", None)
        kwargs.pop("update_fields", None)
        super().save(*args, **kwargs)

    class Meta:
        db_table = "orderHistory"
        ordering = ["statusDate"]
