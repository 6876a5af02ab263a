# product_api/routes.py
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from .database import ProductStore
from .errors import render
from .handlers import (
    create_product_logic,
    delete_product_logic,
    get_product_logic,
    list_products_logic,
    product_stats_logic,
    update_product_logic,
)
from .models import ProductIn

router = APIRouter()

WELCOME = "Welcome to the Product API! Go to /api/products to see all products."


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


@router.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/api/products")
async def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    return render(list_products_logic(store, category, search, page, limit))


# Must stay ahead of /api/products/{product_id}, or "stats" is looked up as an id.
@router.get("/api/products/stats")
async def product_stats(store: ProductStore = Depends(get_store)):
    return render(product_stats_logic(store))


@router.get("/api/products/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return render(get_product_logic(store, product_id))


@router.post("/api/products", status_code=201)
async def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
    return render(create_product_logic(store, payload), status_code=201)


@router.put("/api/products/{product_id}")
async def update_product(product_id: str, payload: ProductIn, store: ProductStore = Depends(get_store)):
    return render(update_product_logic(store, product_id, payload))


@router.delete("/api/products/{product_id}")
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return render(delete_product_logic(store, product_id))
