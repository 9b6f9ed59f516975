from django.db import models

class ShippingMethodModel(models.Model):
    """
    Model for shipping methods (Standard, Priority, Express, ...)
    """
    id = models.AutoField(primary_key=True, db_column="methodId")
    methodName = models.CharField(max_length=100)
    cost = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = "shippingMethod"
