"""Multi-page cluster queries."""

from ecsnav.controllers.query.paginated_query import PaginatedQueryController

__all__ = ["PaginatedQueryController"]
