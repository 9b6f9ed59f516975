import logging

from django.shortcuts import get_object_or_404

from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.decorators import action

from base.abstractModels import PagedList
from base.models import CustomerModel
from base.services import CustomerDeleter, DjangoRowSource, aggregate_page

from api.serializers import (
    CustomerSerializer,
    CustomerWriteSerializer,
    CustomerViewModelSerializer,
    CustomerOrderSerializer,
)
from api.services import CustomerService

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = ("streetNumber", "streetName", "city")

class CustomerViewSet(viewsets.ViewSet):
    lookup_value_regex = r"\d+"
    row_source_class = DjangoRowSource

    def get_row_source(self):
        return self.row_source_class()

    def list(self, request):
        """
        Retrieve customers with their country and order count, sorted by last name.
        GET /api/customer
        Optional query params:
        - page (int): Page number, clipped into range (defaults to 1)
        - size (int): Number of items per page (defaults to 20)
        """
        paginator = PagedList()
        page, size = paginator.get_page_params(request)

        rows = self.get_row_source().list_customer_join_rows()
        paging_list = aggregate_page(rows, page, size)

        data = paginator.paginate_paging_list(paging_list, request)
        serializer = CustomerViewModelSerializer(data, many=True)
        return paginator.get_paginated_response(serializer.data)

    def retrieve(self, request, pk=None):
        """
        Retrieve a customer for the edit form, including the preselected country.
        GET /api/customer/{id}
        """
        customer = get_object_or_404(CustomerModel, id=pk)
        country = CustomerService.get_customer_country(customer.id)
        serializer = CustomerSerializer(customer, context={"country": country})
        return Response(serializer.data)

    def create(self, request):
        """
        Create a customer linked to an address in the selected country.
        POST /api/customer
        {
            "firstName": "Jane",
            "lastName": "Smith",
            "email": "jane@example.com",
            "countryId": 3,
            "streetNumber": "12",      (optional)
            "streetName": "High St",   (optional)
            "city": "Leeds"            (optional)
        }
        Note: the customer id is assigned by the backend
        """
        serializer = CustomerWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        customer = CustomerService.create_customer(
            data["firstName"],
            data["lastName"],
            data["email"],
            data.get("countryId"),
            {field: data.get(field) for field in ADDRESS_FIELDS},
        )
        country = CustomerService.get_customer_country(customer.id)
        return Response(CustomerSerializer(customer, context={"country": country}).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        """
        Edit a customer and replace its address link.
        PUT /api/customer/{id}
        Body: same as POST /api/customer; an "id" field, if sent, must match the URL.
        """
        body_id = request.data.get("id")
        if body_id is not None and str(body_id) != str(pk):
            return Response({"error": "Customer id does not match"}, status=status.HTTP_404_NOT_FOUND)

        serializer = CustomerWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        customer = CustomerService.update_customer(
            pk,
            data,
            data.get("countryId"),
            {field: data.get(field) for field in ADDRESS_FIELDS},
        )
        country = CustomerService.get_customer_country(customer.id)
        return Response(CustomerSerializer(customer, context={"country": country}).data)

    def destroy(self, request, pk=None):
        """
        Delete a customer with its orders, order lines, order history and address links.
        DELETE /api/customer/{id}
        """
        removed = CustomerDeleter(self.get_row_source()).delete_customer(pk)
        logger.debug(f"Customer {pk} removal counts: {removed}")
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"], url_path="orders")
    def orders(self, request, pk=None):
        """
        List a customer's orders.
        GET /api/customer/{id}/orders
        Returns:
        {
            "customerId": 1,
            "orders": [{"orderId": 10, "orderDate": "...", "currentStatus": "Order Received"}]
        }
        """
        orders = CustomerService.list_customer_orders(pk)
        return Response({
            "customerId": int(pk),
            "orders": CustomerOrderSerializer(orders, many=True).data
        })
