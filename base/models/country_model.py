from django.db import models

class CountryModel(models.Model):
    """
    Country an address resolves to. Pre-seeded, selected from a dropdown when editing customers.
    """
    id = models.AutoField(primary_key=True, db_column="countryId")
    countryName = models.CharField(max_length=200)

    def __str__(self):
        return self.countryName

    class Meta:
        db_table = "country"
        ordering = ["countryName"]
