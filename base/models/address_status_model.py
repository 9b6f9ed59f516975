from django.db import models

class AddressStatusModel(models.Model):
    id = models.IntegerField(primary_key=True, db_column="statusId")
    addressStatus = models.CharField(max_length=30)

    def __str__(self):
        return self.addressStatus

    class Meta:
        db_table = "addressStatus"
