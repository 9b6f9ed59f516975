from django.db import models
from django.db.models import Max

class CustomerModel(models.Model):
    """
    Bookstore customer. Owns its address links and its orders, so it can only be
    removed once those are gone (see base.services.customer_deleter).
    """
    id = models.IntegerField(primary_key=True, db_column="customerId")
    firstName = models.CharField(max_length=200)
    lastName = models.CharField(max_length=200)
    email = models.EmailField(max_length=350)

    def save(self, *args, **kwargs):
        if self.id is None:
            last_id = self.__class__.objects.aggregate(last=Max("id"))["last"] or 0
            self.id = last_id + 1
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.firstName} {self.lastName}"

    class Meta:
        db_table = "customer"
