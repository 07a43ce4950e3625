"""
Page resolution model.

A Chapter holds the request-derived inputs and the computed outputs of a
single pagination run in one record. The caller sets the inputs, calls
``paginate()`` once and reads the outputs afterwards.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from aws_lambda_powertools import Logger
from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    StrictStr,
    model_serializer,
)

from paginator.models.errors import (
    MissingBaseURLError,
    MissingTotalResultsError,
    PaginationError,
)
from paginator.utils.constants import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    FIRST_PAGE,
)
from paginator.utils.links import build_page_uri
from paginator.utils.validators import parse_page_request

logger = Logger(UTC=True)

ItemT = TypeVar("ItemT")

LINK_FIELDS: tuple[str, ...] = (
    "current_page_uri",
    "next_page_uri",
    "first_page_uri",
    "previous_page_uri",
)

OUTPUT_FIELDS: tuple[str, ...] = (
    *LINK_FIELDS,
    "last_page",
    "offset",
    "start",
    "end",
)


class Chapter(BaseModel):
    """Pagination inputs and results for one collection of results."""

    # Inputs
    base_url: StrictStr = Field(
        "",
        exclude=True,
        description="Endpoint root used for link rendering",
    )
    total_results: StrictInt = Field(
        0,
        ge=0,
        description="Total items across all pages, usually from a count query",
    )
    limit: StrictInt = Field(
        0,
        ge=0,
        serialization_alias="page_size",
        description="Page size, 0 = default",
    )
    new_page: StrictInt = Field(
        0,
        exclude=True,
        description="Page requested by the caller, 0 or negative = no override",
    )
    current_page: StrictInt = Field(
        0,
        ge=0,
        serialization_alias="page",
        description="Resolved 1-based page, 0 = first page",
    )

    # Outputs
    last_page: StrictInt = 0
    offset: StrictInt = Field(
        0,
        exclude=True,
        description="Zero-based index of the first item on the current page",
    )
    start: StrictInt = 0
    end: StrictInt = Field(
        0,
        description="One past the last item on the current page",
    )

    current_page_uri: StrictStr = Field("", serialization_alias="uri")
    next_page_uri: StrictStr = ""
    first_page_uri: StrictStr = ""
    previous_page_uri: StrictStr = ""

    @classmethod
    def from_request(
        cls,
        params: dict[str, Any] | None,
        *,
        base_url: str,
        total_results: int,
    ) -> "Chapter":
        """Build a Chapter from raw ``page``/``page_size`` query parameters.

        Raises:
            InvalidPageRequestError: if a parameter is not an integer, or
                page_size is negative
        """
        request = parse_page_request(params)

        return cls(
            base_url=base_url,
            total_results=total_results,
            limit=request.page_size,
            new_page=request.page,
        )

    def paginate(self) -> "Chapter":
        """
        Run the pagination pipeline.

        Phases, in order:
        1. Fill defaults for limit, current page and new page
        2. Compute the last page
        3. Resolve the current page and compute offset and window
        4. Render navigation links

        The first failing phase raises and later phases are skipped. Output
        fields are then partially populated and must not be read.

        Returns:
            The same Chapter, for chaining

        Raises:
            MissingTotalResultsError: total_results is 0
            MissingBaseURLError: base_url is empty
        """
        try:
            self._set_defaults()
            self._compute_last_page()
            self._compute_window()
            self._create_links()
        except PaginationError as exc:
            logger.warning(
                "Pagination failed",
                extra={
                    "error_code": exc.error_code,
                    "total_results": self.total_results,
                    "limit": self.limit,
                    "current_page": self.current_page,
                },
            )
            raise

        logger.debug(
            "Pagination resolved",
            extra={
                "page": self.current_page,
                "last_page": self.last_page,
                "start": self.start,
                "end": self.end,
            },
        )

        return self

    def reset(self) -> "Chapter":
        """Restore every output field to its default value."""
        for name in OUTPUT_FIELDS:
            setattr(self, name, type(self).model_fields[name].default)

        return self

    def window(self, items: Sequence[ItemT]) -> Sequence[ItemT]:
        """Return the slice of an already fetched result list for this page."""
        return items[self.start : self.end]

    def to_response(self) -> dict[str, Any]:
        """Serialize with external field names, omitting empty links."""
        return self.model_dump(by_alias=True)

    @model_serializer(mode="wrap")
    def serialize_without_empty_links(
        self,
        handler: SerializerFunctionWrapHandler,
    ) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)

        for name in LINK_FIELDS:
            if getattr(self, name):
                continue
            data.pop(name, None)
            data.pop(type(self).model_fields[name].serialization_alias, None)

        return data

    def _set_defaults(self) -> None:
        if self.limit == 0:
            self.limit = DEFAULT_LIMIT

        if self.current_page == 0:
            self.current_page = DEFAULT_PAGE

        if self.new_page < 0:
            self.new_page = 0

    def _compute_last_page(self) -> None:
        if self.total_results == 0:
            raise MissingTotalResultsError()

        # Integer ceiling division, exact for any int size.
        self.last_page = (self.total_results + self.limit - 1) // self.limit

    def _compute_window(self) -> None:
        if self.new_page > 0 and self.new_page > self.current_page:
            self.current_page = self.new_page

        if self.current_page > self.last_page:
            logger.warning(
                "Requested page beyond last page, clamping",
                extra={
                    "requested_page": self.current_page,
                    "last_page": self.last_page,
                },
            )
            self.current_page = self.last_page

        self.current_page = max(self.current_page, FIRST_PAGE)

        self.offset = (self.current_page - 1) * self.limit
        self.start = self.offset
        self.end = min(self.start + self.limit, self.total_results)

    def _create_links(self) -> None:
        if not self.base_url:
            raise MissingBaseURLError()

        self.current_page_uri = build_page_uri(
            self.base_url, self.current_page, self.limit
        )
        self.first_page_uri = build_page_uri(self.base_url, FIRST_PAGE, self.limit)

        self.next_page_uri = ""
        if self.current_page < self.last_page:
            self.next_page_uri = build_page_uri(
                self.base_url, self.current_page + 1, self.limit
            )

        self.previous_page_uri = ""
        if self.current_page > FIRST_PAGE:
            self.previous_page_uri = build_page_uri(
                self.base_url, self.current_page - 1, self.limit
            )
