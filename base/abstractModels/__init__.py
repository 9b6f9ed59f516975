from .PagingList import PageInfo, PagingList, paginate
from .PagedList import PagedList
