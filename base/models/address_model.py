from django.db import models

from .country_model import CountryModel

class AddressModel(models.Model):
    """
    Stores individual address records for reuse.
    Every address resolves to exactly one country.
    """
    id = models.AutoField(primary_key=True, db_column="addressId")
    streetNumber = models.CharField(max_length=10, blank=True, default="")
    streetName = models.CharField(max_length=200, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")
    country = models.ForeignKey(
        CountryModel,
        on_delete=models.PROTECT,
        db_column="countryId",
        related_name="addresses"
    )

    class Meta:
        db_table = "address"

    def __str__(self):
        parts = [f"{self.streetNumber} {self.streetName}".strip(), self.city, self.country.countryName]
        return ", ".join(part for part in parts if part)
