from .customer_service import CustomerService
