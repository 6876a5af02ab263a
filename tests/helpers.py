# tests/helpers.py
API_HEADERS = {"x-api-key": "my-secret-key"}

NEW_PRODUCT = {
    "name": "Desk Lamp",
    "description": "LED lamp with dimmer",
    "price": 39.99,
    "category": "home",
    "inStock": True,
}
