from .customer_view import CustomerViewSet
from .order_view import OrderViewSet
from .order_status_view import OrderStatusViewSet
from .country_view import CountryViewSet
