from rest_framework import viewsets
from rest_framework.response import Response

from api.serializers import CountrySerializer
from base.models import CountryModel

class CountryViewSet(viewsets.ViewSet):
    """
    Countries offered in the customer create/edit dropdown.
    """
    def list(self, request):
        """
        GET /api/country
        """
        countries = CountryModel.objects.order_by("countryName")
        serializer = CountrySerializer(countries, many=True)
        return Response(serializer.data)
