from enum import Enum

class ORDER_STATUS(Enum):
    """
    Seeded rows of the order status catalog, keyed by status id
    """
    ORDER_RECEIVED = 1
    PENDING_DELIVERY = 2
    DELIVERY_IN_PROGRESS = 3
    DELIVERED = 4
    CANCELLED = 5
    RETURNED = 6

    @property
    def label(self):
        return self.name.replace("_", " ").title()
