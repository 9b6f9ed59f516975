from .row_source import CustomerJoinRow, DjangoRowSource, RowSource
from .customer_aggregator import CustomerViewModel, aggregate, aggregate_page
from .order_status_workflow import EditStatusViewModel, OrderStatusWorkflow
from .customer_deleter import CustomerDeleter
