"""
Unit tests for collapsing the customer join into paged view models.
"""
from base.services.customer_aggregator import CustomerViewModel, aggregate, aggregate_page
from base.services.row_source import CustomerJoinRow

EXAMPLE_ROWS = [
    (1, "A", "Z", "a@x", "US", 2),
    (1, "A", "Z", "a@x", "UK", 2),
    (2, "B", "Y", "b@x", "Unknown", 0),
]


def test_example_scenario():
    items, total = aggregate(EXAMPLE_ROWS, page=1, size=10)
    assert total == 2
    assert items == [
        CustomerViewModel(2, "B", "Y", "b@x", "Unknown", 0),
        CustomerViewModel(1, "A", "Z", "a@x", "US", 2),
    ]


def test_first_country_wins():
    rows = [
        CustomerJoinRow(7, "Ann", "Lee", "ann@x", "Canada", 1),
        CustomerJoinRow(7, "Ann", "Lee", "ann@x", "Germany", 1),
    ]
    items, _ = aggregate(rows, 1, 10)
    assert [item.countryName for item in items] == ["Canada"]


def test_total_counts_distinct_customers_regardless_of_page():
    rows = [(i, "F", f"L{i:02d}", f"{i}@x", "US", 0) for i in range(1, 24)]
    rows += [(3, "F", "L03", "3@x", "UK", 0), (9, "F", "L09", "9@x", "UK", 0)]
    for page, size in [(1, 5), (3, 5), (100, 5), (1, 50)]:
        _, total = aggregate(rows, page, size)
        assert total == 23


def test_sorted_by_last_name_across_pages_without_duplicates():
    rows = [
        (1, "A", "Moss", "1@x", "US", 0),
        (2, "B", "Adams", "2@x", "US", 0),
        (3, "C", "Young", "3@x", "US", 0),
        (2, "B", "Adams", "2@x", "UK", 0),
        (4, "D", "baker", "4@x", "US", 0),
        (5, "E", "Clark", "5@x", "US", 0),
    ]
    first, total = aggregate(rows, 1, 3)
    second, _ = aggregate(rows, 2, 3)
    combined = first + second

    assert total == 5
    assert [c.lastName for c in combined] == ["Adams", "baker", "Clark", "Moss", "Young"]
    assert len({c.customerId for c in combined}) == len(combined)


def test_page_beyond_range_is_clipped_to_last_page():
    rows = [(i, "F", f"L{i}", f"{i}@x", "US", 0) for i in range(1, 6)]
    paging_list = aggregate_page(rows, 9, 2)
    assert paging_list.page == 3
    assert [c.customerId for c in paging_list] == [5]


def test_empty_rows():
    paging_list = aggregate_page([], 1, 20)
    assert paging_list.data == []
    assert paging_list.totalItems == 0
    assert paging_list.page == 1
