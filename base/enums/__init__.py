from .order_status import ORDER_STATUS
from .address_status import ADDRESS_STATUS
