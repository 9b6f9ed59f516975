from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.utils.urls import remove_query_param, replace_query_param

from base.constants import Constants


class PagedList(PageNumberPagination):
    """ A customised DRF's paginator for result sets that are computed in memory """

    page_query_param = "page"
    page_size_query_param = "size"  # Optionally allow the client to override the default page size
    page_size = getattr(settings, "DEFAULT_PAGE_SIZE", Constants.DEFAULT_PAGINATOR_PAGE_SIZE)
    max_page_size = None  # size is not capped, PagingList only needs it to be positive

    def get_page_params(self, request):
        """
        Read the requested page and size from the query string.
        Out of range pages are left as-is, PagingList clips them.
        """
        self.request = request
        try:
            page = int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            page = 1
        return page, self.get_page_size(request)

    def paginate_paging_list(self, paging_list, request):
        self.request = request
        self.paging_list = paging_list
        return paging_list.data

    def get_next_link(self):
        if not self.paging_list.isNext:
            return None
        url = self.request.build_absolute_uri()
        return replace_query_param(url, self.page_query_param, self.paging_list.page + 1)

    def get_previous_link(self):
        if not self.paging_list.isPrevious:
            return None
        url = self.request.build_absolute_uri()
        if self.paging_list.page - 1 == 1:
            return remove_query_param(url, self.page_query_param)
        return replace_query_param(url, self.page_query_param, self.paging_list.page - 1)

    def get_paginated_response(self, data):
        return Response({
            "count": self.paging_list.totalItems,
            "pageSize": self.paging_list.size,
            "page": self.paging_list.page,
            "totalPages": self.paging_list.totalPages,
            "isFirst": self.paging_list.isFirst,
            "isLast": self.paging_list.isLast,
            "next": self.get_next_link(),
            "previous": self.get_previous_link(),
            "results": data
        })
