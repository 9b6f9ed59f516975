from enum import Enum

class ADDRESS_STATUS(Enum):
    """
    Statuses for CustomerAddressModel links
    """
    ACTIVE = 1
    INACTIVE = 2
