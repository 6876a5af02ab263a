#!/usr/bin/env python
from sdk.productclient import ProductAPIError, ProductClient


def main():
    c = ProductClient(base_url="http://127.0.0.1:3000", api_key="my-secret-key")

    print(c.welcome())

    # -----------------------------
    # Seeded catalogue
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nElectronics only...")
    print(c.list_products(category="electronics"))

    print("\nSearching for 'phone'...")
    print(c.list_products(search="phone"))

    print("\nSecond page, two per page...")
    print(c.list_products(page=2, limit=2))

    # -----------------------------
    # Create / update / delete
    # -----------------------------
    print("\nCreating product...")
    kettle = c.create_product("Kettle", "1.7L electric kettle", 35, "kitchen", True)
    print(kettle)

    print("\nUpdating product...")
    print(c.update_product(kettle["id"], "Kettle", "1.7L electric kettle", 29.5, "kitchen", False))

    print("\nCategory stats...")
    print(c.stats())

    print("\nDeleting product...")
    print(c.delete_product(kettle["id"]))

    try:
        c.get_product(kettle["id"])
    except ProductAPIError as e:
        print(f"Lookup after delete: {e}")

    # -----------------------------
    # Writes without the key are rejected
    # -----------------------------
    anonymous = ProductClient(base_url=c.base_url)
    try:
        anonymous.create_product("Toaster", "2-slice toaster", 25, "kitchen")
    except ProductAPIError as e:
        print(f"\nAnonymous create: {e}")


if __name__ == "__main__":
    main()
