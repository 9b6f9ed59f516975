"""
Collapses the customer join into one row per customer and pages the result.

The join fans out once per address link, so a customer appears as many times as
it has links. Grouping, counting and sorting all happen on the full row set
before any paging, which means the whole join has to fit in memory.
"""
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from base.abstractModels.PagingList import PagingList
from base.services.row_source import CustomerJoinRow


@dataclass(frozen=True)
class CustomerViewModel:
    customerId: int
    firstName: str
    lastName: str
    email: str
    countryName: str
    orderCount: int


def group_customer_rows(rows: Iterable[tuple]) -> List[CustomerViewModel]:
    """
    One view model per distinct customer id, in order of first appearance.
    The first row seen for a customer supplies every field, country included.
    """
    customers = {}
    for raw in rows:
        row = CustomerJoinRow._make(raw)
        if row.customerId in customers:
            continue
        customers[row.customerId] = CustomerViewModel(
            customerId=row.customerId,
            firstName=row.firstName,
            lastName=row.lastName,
            email=row.email,
            countryName=row.countryName,
            orderCount=row.orderCount,
        )
    return list(customers.values())


def sort_by_last_name(customers: Iterable[CustomerViewModel]) -> List[CustomerViewModel]:
    # Stable: customers sharing a last name keep their first-appearance order
    return sorted(customers, key=lambda customer: (customer.lastName or "").casefold())


def aggregate_page(rows: Iterable[tuple], page: int, size: int) -> PagingList[CustomerViewModel]:
    customers = sort_by_last_name(group_customer_rows(rows))
    return PagingList.create(lambda _page, _size: customers, len(customers), page, size)


def aggregate(rows: Iterable[tuple], page: int, size: int) -> Tuple[List[CustomerViewModel], int]:
    """
    Args:
        rows: CustomerJoinRow values (or plain 6-tuples in the same field order).
        page: Requested 1-based page, clipped into range.
        size: Page size, >= 1.

    Returns:
        (items, total_items) where total_items counts distinct customers across all rows.
    """
    paging_list = aggregate_page(rows, page, size)
    return paging_list.data, paging_list.totalItems
