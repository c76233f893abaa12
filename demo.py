#!/usr/bin/env python
import os

from sdk.pycatalog import CatalogAPIError, CatalogClient


def main():
    c = CatalogClient(
        base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("CATALOG_API_KEY", "dev-api-key"),
    )

    # -----------------------------
    # Greeting
    # -----------------------------
    print(c.greeting())

    # -----------------------------
    # List, filter, search, paginate
    # -----------------------------
    print("\nAll products...")
    print(c.list_products())

    print("\nElectronics only...")
    print(c.list_products(category="electronics"))

    print("\nSearching for 'LAPTOP'...")
    print(c.list_products(search="LAPTOP"))

    print("\nTwo per page, page 2...")
    print(c.list_products(page=2, limit=2))

    # -----------------------------
    # Create / read / update / delete
    # -----------------------------
    print("\nCreating a product...")
    created = c.create_product("Kettle", "1.7L electric kettle", 35, "kitchen", True)
    print(created)
    pid = created["id"]

    print("\nFetching it back...")
    print(c.get_product(pid))

    print("\nMarking it out of stock...")
    print(c.update_product(pid, "Kettle", "1.7L electric kettle", 32.5, "kitchen", False))

    print("\nDeleting it...")
    print(c.delete_product(pid))

    # -----------------------------
    # Failures
    # -----------------------------
    print("\nInvalid payload...")
    try:
        c.create_product("", "no name", -5, "kitchen", True)
    except CatalogAPIError as e:
        print(e.status_code, e.message, e.details)

    print("\nMissing product...")
    try:
        c.get_product(pid)
    except CatalogAPIError as e:
        print(e.status_code, e.message)

    print("\nNo API key...")
    anonymous = CatalogClient(base_url=c.base_url)
    try:
        anonymous.delete_product("1")
    except CatalogAPIError as e:
        print(e.status_code, e.message)


if __name__ == "__main__":
    main()
