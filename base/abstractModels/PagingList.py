"""
Generic paging over an ordered, possibly computed, result set.

The page math lives in `paginate`; `PagingList` pairs a page of data with that
page's metadata and can be built eagerly or from a row-fetch callable.
"""
import math
from dataclasses import dataclass
from itertools import islice
from typing import Callable, Generic, Iterable, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageInfo:
    totalItems: int
    totalPages: int
    page: int
    size: int
    isFirst: bool
    isLast: bool

    @property
    def isNext(self) -> bool:
        return not self.isLast

    @property
    def isPrevious(self) -> bool:
        return not self.isFirst

    @property
    def offset(self) -> int:
        """Number of items that precede this page in the full sequence."""
        return (self.page - 1) * self.size

    def slice(self, items: Iterable[T]) -> List[T]:
        """Take this page's window out of the full ordered sequence."""
        return list(islice(items, self.offset, self.offset + self.size))


def calc_total_pages(total_items: int, size: int) -> int:
    return math.ceil(total_items / size)


def clip_page(page: int, total_items: int, size: int) -> int:
    """
    Clamp the requested page into [1, max(totalPages, 1)].
    An empty collection still yields page 1 so the offset stays valid.
    """
    total_pages = calc_total_pages(total_items, size)
    return min(max(page, 1), max(total_pages, 1))


def paginate(total_items: int, page: int, size: int) -> PageInfo:
    """
    Compute the clipped page and its boundary flags.

    Args:
        total_items (int): Size of the full collection, >= 0.
        page (int):        Requested 1-based page, any value.
        size (int):        Items per page, >= 1.

    Returns:
        PageInfo: Metadata for the clipped page.

    Raises:
        ValueError: If size < 1 or total_items < 0.
    """
    if size < 1:
        raise ValueError(f"Page size must be at least 1, got {size}")
    if total_items < 0:
        raise ValueError(f"Total item count cannot be negative, got {total_items}")

    total_pages = calc_total_pages(total_items, size)
    clipped = clip_page(page, total_items, size)
    return PageInfo(
        totalItems=total_items,
        totalPages=total_pages,
        page=clipped,
        size=size,
        isFirst=clipped <= 1,
        isLast=clipped >= total_pages,
    )


class PagingList(Generic[T]):
    """ One page of an ordered collection together with its paging metadata """

    def __init__(self, data: Iterable[T], total_items: int, page: int, size: int):
        self.info = paginate(total_items, page, size)
        self.data = list(data)

    @classmethod
    def create(cls, data_generator: Callable[[int, int], Iterable[T]], total_items: int, page: int, size: int) -> "PagingList[T]":
        """
        Clip the page first, fetch with the clipped page, then apply offset/limit to
        whatever came back. Generators that ignore paging and hand back the full
        sequence are therefore still cut down to one page.
        """
        info = paginate(total_items, page, size)
        data = data_generator(info.page, size)
        return cls(info.slice(data), total_items, info.page, size)

    def __iter__(self):
        return iter(self.data)

    def __len__(self):
        return len(self.data)

    @property
    def totalItems(self):
        return self.info.totalItems

    @property
    def totalPages(self):
        return self.info.totalPages

    @property
    def page(self):
        return self.info.page

    @property
    def size(self):
        return self.info.size

    @property
    def isFirst(self):
        return self.info.isFirst

    @property
    def isLast(self):
        return self.info.isLast

    @property
    def isNext(self):
        return self.info.isNext

    @property
    def isPrevious(self):
        return self.info.isPrevious
