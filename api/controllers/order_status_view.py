from rest_framework import viewsets
from rest_framework.response import Response

from base.services import DjangoRowSource, OrderStatusWorkflow
from api.serializers import OrderStatusSerializer

class OrderStatusViewSet(viewsets.ViewSet):
    def list(self, request):
        """
        GET /api/orderstatus
        Optional query params:
        - selectable (bool): true => only statuses an order can be moved to
        """
        workflow = OrderStatusWorkflow(DjangoRowSource())

        statuses = workflow.row_source.list_order_statuses()
        if request.query_params.get("selectable", "").lower() == "true":
            statuses = workflow.selectable_statuses()

        serializer = OrderStatusSerializer(statuses, many=True, context={"workflow": workflow})
        return Response(serializer.data)
