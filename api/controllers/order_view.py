from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.decorators import action

from base.exceptions import NotFound
from base.services import DjangoRowSource, OrderStatusWorkflow
from api.serializers import EditStatusSerializer, OrderHistorySerializer, StatusChangeSerializer

class OrderViewSet(viewsets.ViewSet):
    lookup_value_regex = r"\d+"
    row_source_class = DjangoRowSource

    def get_workflow(self):
        return OrderStatusWorkflow(self.row_source_class())

    @action(detail=True, methods=["get", "post"], url_path="status")
    def order_status(self, request, pk=None):
        """
        GET /api/order/{id}/status
        Returns the order's current status text and the status catalog.

        POST /api/order/{id}/status
        {
            "newStatusId": 2
        }
        Moves the order to a new status and appends an order history entry.
        Statuses at or above the configured threshold (4 by default) are rejected.
        """
        workflow = self.get_workflow()

        if request.method == "GET":
            view_model = workflow.describe(pk)
            return Response(EditStatusSerializer(view_model, context={"workflow": workflow}).data)

        serializer = StatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        history = workflow.apply_status_change(pk, serializer.validated_data["newStatusId"])
        return Response(OrderHistorySerializer(history).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["get"], url_path="history")
    def history(self, request, pk=None):
        """
        GET /api/order/{id}/history
        The order's status changes, oldest first.
        """
        order = self.row_source_class().get_order(pk)
        if order is None:
            raise NotFound(f"Order {pk} does not exist")

        serializer = OrderHistorySerializer(order.history.order_by("statusDate"), many=True)
        return Response(serializer.data)
