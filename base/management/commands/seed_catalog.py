from django.core.management.base import BaseCommand
from django.db import DatabaseError, connection, transaction

from base.enums import ADDRESS_STATUS, ORDER_STATUS
from base.models import AddressStatusModel, CountryModel, OrderStatusModel, ShippingMethodModel

DEFAULT_SHIPPING_METHODS = [
    ("Standard", 5.90),
    ("Priority", 8.90),
    ("Express", 11.90),
    ("International", 24.50),
]

DEFAULT_COUNTRIES = [
    "Australia",
    "Canada",
    "Germany",
    "United Kingdom",
    "United States of America",
]

class Command(BaseCommand):
    help = "Seeds the order status, address status, shipping method and country catalogs. Safe to run repeatedly."

    def add_arguments(self, parser):
        parser.add_argument(
            "--skip-countries",
            action="store_true",
            help="Only seed the status and shipping catalogs.",
        )

    def handle(self, *args, **options):
        try:
            connection.ensure_connection()
            self.stdout.write("Database connection successfully established.")
        except DatabaseError as e:
            self.stdout.write(self.style.ERROR(f"Failed to connect to database: {e}"))
            return

        with transaction.atomic():
            for status in ORDER_STATUS:
                OrderStatusModel.objects.update_or_create(id=status.value, defaults={"statusValue": status.label})

            for status in ADDRESS_STATUS:
                AddressStatusModel.objects.update_or_create(id=status.value, defaults={"addressStatus": status.name.title()})

            for name, cost in DEFAULT_SHIPPING_METHODS:
                ShippingMethodModel.objects.get_or_create(methodName=name, defaults={"cost": cost})

            if not options["skip_countries"]:
                for name in DEFAULT_COUNTRIES:
                    CountryModel.objects.get_or_create(countryName=name)

        self.stdout.write(self.style.SUCCESS("Catalog tables seeded successfully."))
