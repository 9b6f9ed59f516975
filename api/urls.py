from rest_framework.routers import DefaultRouter

from .controllers import *

router = DefaultRouter(trailing_slash="")  # No trailing slash
router.register(r"customer", CustomerViewSet, "customer")
router.register(r"order", OrderViewSet, "order")
router.register(r"orderstatus", OrderStatusViewSet, "orderstatus")
router.register(r"country", CountryViewSet, "country")

urlpatterns = router.urls
