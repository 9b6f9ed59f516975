from rest_framework import serializers
from base.models import *

"""
Serializers for the corresponding models and view models.
Converts model instances to and from JSON format for API interactions.
"""

class CountrySerializer(serializers.ModelSerializer):
    class Meta:
        model = CountryModel
        fields = ["id", "countryName"]


class OrderStatusSerializer(serializers.ModelSerializer):
    selectable = serializers.SerializerMethodField()

    class Meta:
        model = OrderStatusModel
        fields = ["id", "statusValue", "selectable"]

    def get_selectable(self, obj):
        workflow = self.context.get("workflow")
        return workflow.is_selectable(obj.id) if workflow else None


class CustomerViewModelSerializer(serializers.Serializer):
    """
    Read-only shape of one row of the aggregated customer list
    """
    customerId = serializers.IntegerField()
    firstName = serializers.CharField()
    lastName = serializers.CharField()
    email = serializers.CharField()
    countryName = serializers.CharField()
    orderCount = serializers.IntegerField()


class CustomerSerializer(serializers.ModelSerializer):
    """
    Customer detail for the edit form, with the preselected country
    """
    countryId = serializers.SerializerMethodField()

    class Meta:
        model = CustomerModel
        fields = ["id", "firstName", "lastName", "email", "countryId"]

    def get_countryId(self, obj):
        country = self.context.get("country")
        return country.id if country else None


class CustomerWriteSerializer(serializers.Serializer):
    """
    Body accepted when creating or editing a customer.
    countryId is validated by CustomerService so a missing selection reports the same
    message on both create and edit.
    """
    firstName = serializers.CharField(max_length=200)
    lastName = serializers.CharField(max_length=200)
    email = serializers.EmailField(max_length=350)
    countryId = serializers.IntegerField(required=False, allow_null=True)
    streetNumber = serializers.CharField(max_length=10, required=False, allow_blank=True)
    streetName = serializers.CharField(max_length=200, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)


class CustomerOrderSerializer(serializers.ModelSerializer):
    """
    Simplified order serializer for a customer's order list
    """
    orderId = serializers.IntegerField(source="id", read_only=True)
    currentStatus = serializers.SerializerMethodField()

    class Meta:
        model = OrderModel
        fields = ["orderId", "orderDate", "currentStatus"]

    def get_currentStatus(self, obj):
        return obj.currentStatus.statusValue if obj.currentStatus else None


class OrderHistorySerializer(serializers.ModelSerializer):
    historyId = serializers.UUIDField(source="id", read_only=True)
    orderId = serializers.IntegerField(source="order_id", read_only=True)
    statusId = serializers.IntegerField(source="status_id", read_only=True)

    class Meta:
        model = OrderHistoryModel
        fields = ["historyId", "orderId", "statusId", "statusDate"]


class EditStatusSerializer(serializers.Serializer):
    """
    Edit-status view model: the order, its current status text and the status catalog
    """
    orderId = serializers.IntegerField()
    customerId = serializers.IntegerField()
    currentStatus = serializers.CharField(allow_null=True)
    statuses = serializers.SerializerMethodField()

    def get_statuses(self, obj):
        return OrderStatusSerializer(obj.statuses, many=True, context=self.context).data


class StatusChangeSerializer(serializers.Serializer):
    newStatusId = serializers.IntegerField()
