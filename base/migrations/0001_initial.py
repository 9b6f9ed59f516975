import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CountryModel",
            fields=[
                ("id", models.AutoField(db_column="countryId", primary_key=True, serialize=False)),
                ("countryName", models.CharField(max_length=200)),
            ],
            options={
                "db_table": "country",
                "ordering": ["countryName"],
            },
        ),
        migrations.CreateModel(
            name="AddressStatusModel",
            fields=[
                ("id", models.IntegerField(db_column="statusId", primary_key=True, serialize=False)),
                ("addressStatus", models.CharField(max_length=30)),
            ],
            options={
                "db_table": "addressStatus",
            },
        ),
        migrations.CreateModel(
            name="CustomerModel",
            fields=[
                ("id", models.IntegerField(db_column="customerId", primary_key=True, serialize=False)),
                ("firstName", models.CharField(max_length=200)),
                ("lastName", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=350)),
            ],
            options={
                "db_table": "customer",
            },
        ),
        migrations.CreateModel(
            name="ShippingMethodModel",
            fields=[
                ("id", models.AutoField(db_column="methodId", primary_key=True, serialize=False)),
                ("methodName", models.CharField(max_length=100)),
                ("cost", models.FloatField(blank=True, null=True)),
            ],
            options={
                "db_table": "shippingMethod",
            },
        ),
        migrations.CreateModel(
            name="OrderStatusModel",
            fields=[
                ("id", models.IntegerField(db_column="statusId", primary_key=True, serialize=False)),
                ("statusValue", models.CharField(max_length=30)),
            ],
            options={
                "db_table": "orderStatus",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="AddressModel",
            fields=[
                ("id", models.AutoField(db_column="addressId", primary_key=True, serialize=False)),
                ("streetNumber", models.CharField(blank=True, default="", max_length=10)),
                ("streetName", models.CharField(blank=True, default="", max_length=200)),
                ("city", models.CharField(blank=True, default="", max_length=100)),
                ("country", models.ForeignKey(db_column="countryId", on_delete=django.db.models.deletion.PROTECT, related_name="addresses", to="base.countrymodel")),
            ],
            options={
                "db_table": "address",
            },
        ),
        migrations.CreateModel(
            name="CustomerAddressModel",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("address", models.ForeignKey(db_column="addressId", on_delete=django.db.models.deletion.PROTECT, related_name="address_customers", to="base.addressmodel")),
                ("customer", models.ForeignKey(db_column="customerId", on_delete=django.db.models.deletion.PROTECT, related_name="customer_addresses", to="base.customermodel")),
                ("status", models.ForeignKey(db_column="statusId", on_delete=django.db.models.deletion.PROTECT, to="base.addressstatusmodel")),
            ],
            options={
                "db_table": "customerAddress",
                "unique_together": {("customer", "address")},
            },
        ),
        migrations.CreateModel(
            name="OrderModel",
            fields=[
                ("id", models.AutoField(db_column="orderId", primary_key=True, serialize=False)),
                ("orderDate", models.DateTimeField(default=django.utils.timezone.now)),
                ("customer", models.ForeignKey(db_column="customerId", on_delete=django.db.models.deletion.PROTECT, related_name="orders", to="base.customermodel")),
                ("shippingMethod", models.ForeignKey(blank=True, db_column="shippingMethodId", null=True, on_delete=django.db.models.deletion.PROTECT, to="base.shippingmethodmodel")),
                ("currentStatus", models.ForeignKey(blank=True, db_column="currentStatusId", null=True, on_delete=django.db.models.deletion.PROTECT, related_name="current_orders", to="base.orderstatusmodel")),
            ],
            options={
                "db_table": "custOrder",
            },
        ),
        migrations.CreateModel(
            name="OrderLineModel",
            fields=[
                ("id", models.AutoField(db_column="lineId", primary_key=True, serialize=False)),
                ("bookId", models.IntegerField(blank=True, null=True)),
                ("price", models.FloatField(blank=True, null=True)),
                ("order", models.ForeignKey(db_column="orderId", on_delete=django.db.models.deletion.PROTECT, related_name="lines", to="base.ordermodel")),
            ],
            options={
                "db_table": "orderLine",
            },
        ),
        migrations.CreateModel(
            name="OrderHistoryModel",
            fields=[
                ("id", models.UUIDField(db_column="historyId", default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("statusDate", models.DateTimeField(default=django.utils.timezone.now)),
                ("order", models.ForeignKey(db_column="orderId", on_delete=django.db.models.deletion.PROTECT, related_name="history", to="base.ordermodel")),
                ("status", models.ForeignKey(db_column="statusId", on_delete=django.db.models.deletion.PROTECT, to="base.orderstatusmodel")),
            ],
            options={
                "db_table": "orderHistory",
                "ordering": ["statusDate"],
            },
        ),
    ]
