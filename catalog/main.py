# catalog/main.py
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .auth import require_api_key
from .config import Settings, get_settings
from .database import ProductStore, get_store, seed_products
from .error_handlers import register_error_handlers
from .logic import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, update_product_logic
)
from .models import Product, ProductIn, ProductPage
from .observability import log_requests, setup_logging
from .validation import validate_product

router = APIRouter()

# ---------------------------
# Root
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello World!"

# ---------------------------
# Product endpoints (public)
# ---------------------------
@router.get("/api/products", response_model=ProductPage)
async def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    # page/limit stay strings: junk values fall back to defaults instead of a 400
    return await list_products_logic(store, category, search, page, limit)

@router.get("/api/products/{product_id}", response_model=Product)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)

# ---------------------------
# Product endpoints (authenticated)
# Route-level dependencies run first: auth, then body validation.
# ---------------------------
@router.post(
    "/api/products",
    status_code=201,
    response_model=Product,
    dependencies=[Depends(require_api_key)],
)
async def create_product(
    payload: ProductIn = Depends(validate_product),
    store: ProductStore = Depends(get_store),
):
    return await create_product_logic(store, payload)

@router.put(
    "/api/products/{product_id}",
    response_model=Product,
    dependencies=[Depends(require_api_key)],
)
async def update_product(
    product_id: str,
    payload: ProductIn = Depends(validate_product),
    store: ProductStore = Depends(get_store),
):
    return await update_product_logic(store, product_id, payload)

@router.delete(
    "/api/products/{product_id}",
    response_model=Product,
    dependencies=[Depends(require_api_key)],
)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await delete_product_logic(store, product_id)

# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # root logger is configured by the serving process, not on import
        setup_logging(settings.log_level, settings.log_format)
        yield

    app = FastAPI(title="catalog-api (in-memory products)", lifespan=lifespan)
    app.state.settings = settings
    if store is None:
        store = ProductStore(seed_products() if settings.seed_data else None)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
