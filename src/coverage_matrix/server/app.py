"""Starlette ASGI application answering category changes.

The server holds only the immutable dataset.  Every ``/api/state``
request runs :func:`~coverage_matrix.state.on_category_changed`, so each
response is built from scratch for the requested category.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from ..axes import category_domain
from ..models import CategoryField, Dataset
from ..state import Layout, on_category_changed
from ..visualization import build_matrix_data, build_report_html

logger = logging.getLogger(__name__)


def create_app(
    dataset: Dataset,
    fields: Sequence[CategoryField],
    layout: Optional[Layout] = None,
    initial: Optional[CategoryField] = None,
) -> Starlette:
    """Build the Starlette application serving *dataset*.

    Args:
        dataset: Goals and programs, loaded before the server starts
        fields: Selectable category fields
        layout: Plot geometry shared by every response
        initial: Field drawn on first page load
    """
    fields = list(fields)
    by_column = {f.column: f for f in fields}
    page = build_report_html(dataset, fields, layout=layout, initial=initial, live=True)

    async def homepage(request: Request) -> HTMLResponse:
        return HTMLResponse(page)

    async def api_categories(request: Request) -> JSONResponse:
        return JSONResponse(
            [
                {
                    "column": f.column,
                    "label": f.label,
                    "values": category_domain(dataset.programs, f),
                }
                for f in fields
            ]
        )

    async def api_state(request: Request) -> JSONResponse:
        column = request.query_params.get("category")
        if column is None:
            field = initial or fields[0]
        else:
            field = by_column.get(column)
        if field is None:
            return JSONResponse(
                {"error": f"unknown category: {column}", "available": list(by_column)},
                status_code=400,
            )
        logger.debug("Category changed to %s", field.column)
        return JSONResponse(on_category_changed(dataset, field, build_matrix_data, layout))

    routes = [
        Route("/", homepage),
        Route("/api/categories", api_categories),
        Route("/api/state", api_state),
    ]
    return Starlette(routes=routes)
