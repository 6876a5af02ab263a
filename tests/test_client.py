# tests/test_client.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from sdk.productclient import ProductAPIError, ProductClient, _unwrap

BASE = "http://testserver"


@pytest.fixture
def sdk(app):
    return ProductClient(base_url=BASE, api_key="my-secret-key", session=TestClient(app))


@pytest.fixture
def anonymous(app):
    return ProductClient(base_url=BASE, session=TestClient(app))


def test_welcome(sdk):
    assert sdk.welcome().startswith("Welcome to the Product API!")


def test_list_with_filters(sdk):
    page = sdk.list_products(category="electronics", page=2, limit=1)
    assert page["total"] == 2
    assert [p["id"] for p in page["products"]] == ["2"]


def test_crud_cycle(sdk):
    created = sdk.create_product("Blender", "600W blender", 70, "kitchen", True)
    assert sdk.get_product(created["id"]) == created

    updated = sdk.update_product(created["id"], "Blender", "800W blender", 85.5, "appliances", False)
    assert updated["category"] == "appliances"
    assert sdk.stats() == {"electronics": 2, "kitchen": 1, "appliances": 1}

    deleted = sdk.delete_product(created["id"])
    assert deleted["product"]["id"] == created["id"]

    with pytest.raises(ProductAPIError) as exc:
        sdk.get_product(created["id"])
    assert exc.value.status_code == 404
    assert exc.value.error == "NotFoundError"


def test_anonymous_writes_raise(anonymous):
    with pytest.raises(ProductAPIError) as exc:
        anonymous.delete_product("1")
    assert exc.value.status_code == 401
    assert exc.value.message == "Invalid or missing API key"
    assert anonymous.get_product("1")["name"] == "Laptop"


def test_create_product_async(app):
    sdk = ProductClient(base_url="http://test", api_key="my-secret-key", session=TestClient(app))

    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport) as ac:
            return await sdk.create_product_async("Mixer", "Stand mixer", 250, "kitchen", client=ac)

    created = asyncio.run(run())
    assert created["name"] == "Mixer"
    assert sdk.stats()["kitchen"] == 2


class FakeResponse:
    def __init__(self, status_code, body, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        return self._body


@pytest.mark.parametrize("body", [["oops"], "bad gateway", None])
def test_error_body_that_is_not_an_object(body):
    with pytest.raises(ProductAPIError) as exc:
        _unwrap(FakeResponse(502, body, text="Bad Gateway"))
    assert exc.value.status_code == 502
    assert exc.value.error == "Error"
    assert exc.value.message == "Bad Gateway"
