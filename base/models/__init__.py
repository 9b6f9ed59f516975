from .country_model import CountryModel
from .address_model import AddressModel
from .address_status_model import AddressStatusModel
from .customer_model import CustomerModel
from .customer_address_model import CustomerAddressModel
from .shipping_method_model import ShippingMethodModel
from .order_status_model import OrderStatusModel
from .order_model import OrderModel
from .order_line_model import OrderLineModel
from .order_history_model import OrderHistoryModel
