from fastapi import FastAPI

from catalog_admin.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_admin.entrypoints.http.routes.categories import router as categories_router
from catalog_admin.entrypoints.http.routes.health import router as health_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Catalog Admin API",
        description="""
        Administration API for catalog categories.

        ## Features
        - Create, read, update and delete categories
        - Search categories with filter, sort and pagination

        ## Pagination
        Malformed pagination input never fails a request; it falls back
        to page 1 with 15 items per page.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(categories_router, prefix="/v1")

    return app


app = build_app()
