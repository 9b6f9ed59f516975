from django.db import models

class OrderStatusModel(models.Model):
    """
    Finite, pre-seeded catalog of order statuses.
    """
    id = models.IntegerField(primary_key=True, db_column="statusId")
    statusValue = models.CharField(max_length=30)

    def __str__(self):
        return self.statusValue

    class Meta:
        db_table = "orderStatus"
        ordering = ["id"]
