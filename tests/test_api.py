import time
from pathlib import Path


def _create_account(client, nickname="alice"):
    response = client.post(
        "/api/accounts",
        json={"nickname": nickname, "firstName": "Alice", "lastName": "Smith", "email": f"{nickname}@example.com"},
    )
    assert response.status_code == 201
    return response.json()


def _create_product(client, name="Laptop", price=1000, category="electronics", **extra):
    response = client.post("/api/products", json={"name": name, "price": price, "category": category, **extra})
    assert response.status_code == 201
    return response.json()


def test_account_lifecycle(client):
    account = _create_account(client)
    assert account["firstName"] == "Alice"
    assert account["orders"] == []

    assert client.get(f"/api/accounts/{account['id']}").json()["nickname"] == "alice"
    assert client.get("/api/accounts/nickname/alice").json()["id"] == account["id"]

    response = client.put(
        f"/api/accounts/{account['id']}",
        json={"nickname": "alicia", "firstName": "Alicia", "lastName": "Smith", "email": "alicia@example.com"},
    )
    assert response.status_code == 200
    assert response.json()["nickname"] == "alicia"
    assert client.get("/api/accounts/nickname/alice").status_code == 404

    assert client.delete(f"/api/accounts/{account['id']}").status_code == 204
    assert client.get(f"/api/accounts/{account['id']}").status_code == 404
    assert client.delete(f"/api/accounts/{account['id']}").status_code == 404


def test_account_validation_errors_are_bad_request(client):
    response = client.post("/api/accounts", json={"nickname": "bob", "firstName": "Bob", "lastName": "B", "email": "nope"})
    assert response.status_code == 400

    _create_account(client, "bob")
    duplicate = client.post(
        "/api/accounts",
        json={"nickname": "bob", "firstName": "Bob", "lastName": "B", "email": "bob2@example.com"},
    )
    assert duplicate.status_code == 400
    assert "detail" in duplicate.json()


def test_products_listing_and_filters(client):
    assert client.get("/api/products").status_code == 404

    _create_product(client, "Laptop", 1000, "electronics")
    _create_product(client, "Desk", 300, "furniture")

    assert len(client.get("/api/products").json()) == 2
    assert [p["name"] for p in client.get("/api/products", params={"category": "furniture"}).json()] == ["Desk"]
    assert [p["name"] for p in client.get("/api/products", params={"price": 1000}).json()] == ["Laptop"]
    assert client.get("/api/products", params={"category": "toys"}).status_code == 404


def test_product_validation_and_bulk(client):
    assert client.post("/api/products", json={"name": "Free", "price": 0, "category": "misc"}).status_code == 400
    assert client.post("/api/products", json={"name": "X", "price": 5, "category": "misc", "accountId": 99}).status_code == 404

    response = client.post(
        "/api/products/bulk",
        json=[{"name": "Pen", "price": 2, "category": "stationery"}, {"name": "Ink", "price": 3, "category": "stationery"}],
    )
    assert response.status_code == 201
    assert [p["name"] for p in response.json()] == ["Pen", "Ink"]


def test_product_with_owner_and_update(client):
    account = _create_account(client)
    product = _create_product(client, accountId=account["id"])
    assert product["accountId"] == account["id"]
    assert product["account"]["nickname"] == "alice"

    response = client.put(
        f"/api/products/{product['id']}",
        json={"name": "Laptop Pro", "price": 1500, "category": "electronics"},
    )
    assert response.status_code == 200
    assert client.get(f"/api/products/{product['id']}").json()["name"] == "Laptop Pro"
    assert client.put("/api/products/999", json={"name": "A", "price": 1, "category": "b"}).status_code == 404


def test_order_lifecycle(client):
    account = _create_account(client)
    laptop = _create_product(client, "Laptop", 1000)
    mouse = _create_product(client, "Mouse", 20, "accessories")

    response = client.post("/api/orders", json={"accountId": account["id"], "productIds": [laptop["id"], mouse["id"]]})
    assert response.status_code == 201
    order = response.json()
    assert order["totalPrice"] == 1020
    assert order["accountId"] == account["id"]
    assert "orderDate" in order

    assert [o["id"] for o in client.get(f"/api/orders/account/{account['id']}").json()] == [order["id"]]
    assert [o["id"] for o in client.get(f"/api/accounts/{account['id']}").json()["orders"]] == [order["id"]]

    filtered = client.get("/api/orders/filter/by-category-jpql", params={"category": "accessories"})
    assert [o["id"] for o in filtered.json()] == [order["id"]]
    assert client.get("/api/orders/filter/by-price-native", params={"price": 1000}).status_code == 200
    assert client.get("/api/orders/filter/by-price-native", params={"price": 7}).status_code == 404

    response = client.put(f"/api/orders/{order['id']}", json={"productIds": [mouse["id"]]})
    assert response.status_code == 200
    assert [p["id"] for p in response.json()["products"]] == [mouse["id"]]

    assert client.delete(f"/api/products/{mouse['id']}").status_code == 204
    assert client.get(f"/api/orders/{order['id']}").json()["products"] == []

    assert client.delete(f"/api/orders/{order['id']}").status_code == 204
    assert client.get(f"/api/orders/{order['id']}").status_code == 404
    assert client.get("/api/orders").json() == []


def test_order_creation_errors(client):
    account = _create_account(client)
    product = _create_product(client)

    assert client.post("/api/orders", json={"productIds": [product["id"]]}).status_code == 400
    assert client.post("/api/orders", json={"accountId": account["id"], "productIds": []}).status_code == 400
    assert client.post("/api/orders", json={"accountId": 999, "productIds": [product["id"]]}).status_code == 404
    assert client.post("/api/orders", json={"accountId": account["id"], "productIds": [product["id"], 999]}).status_code == 404


def test_categories(client):
    response = client.post("/api/categories", json={"name": "books"})
    assert response.status_code == 201
    category = response.json()

    assert client.put(f"/api/categories/{category['id']}", json={"name": "ebooks"}).json()["name"] == "ebooks"
    assert [c["name"] for c in client.get("/api/categories").json()] == ["ebooks"]
    assert client.delete(f"/api/categories/{category['id']}").status_code == 204
    assert client.get(f"/api/categories/{category['id']}").status_code == 404


def test_number_of_requests(client):
    _create_account(client)
    client.get("/api/accounts")
    client.get("/api/accounts/999")
    client.delete("/api/accounts/999")

    counts = client.get("/api/number-of-requests").json()

    assert counts["general"] == 5
    assert counts["GET"] == 3
    assert counts["POST"] == 1


def test_log_generation_and_download(client, settings):
    line = "2019-07-15 08:00:00,000 - test - INFO - seeded entry"
    with open(settings.LOG_FILE_PATH, "a", encoding="utf-8") as f:
        f.write(line + "\n")

    assert client.post("/api/logs/generate", params={"date": "15-07-2019"}).status_code == 400

    response = client.post("/api/logs/generate", params={"date": "2019-07-15"})
    assert response.status_code == 200
    task_id = response.json()["taskId"]

    status = None
    for _ in range(100):
        status = client.get(f"/api/logs/status/{task_id}").json()["status"]
        if status != "IN_PROGRESS":
            break
        time.sleep(0.05)
    assert status == "COMPLETED"

    download = client.get(f"/api/logs/download/{task_id}")
    assert download.status_code == 200
    assert "attachment" in download.headers["content-disposition"]
    lines = download.text.splitlines()
    assert line in lines
    assert all("2019-07-15" in entry for entry in lines)

    by_date = client.get("/api/logs/by-date", params={"date": "2019-07-15"})
    assert by_date.status_code == 200
    assert by_date.headers["content-type"].startswith("text/plain")
    assert line in by_date.text.split("\n")

    assert client.get("/api/logs/status/unknown").status_code == 404
    assert client.get("/api/logs/download/unknown").status_code == 404
    assert client.get("/api/logs/by-date", params={"date": "1999-01-01"}).status_code == 404
    assert Path(settings.LOG_OUTPUT_DIR).is_dir()


def test_product_responses_follow_owner_changes(client):
    account = _create_account(client, "seller")
    product = _create_product(client, accountId=account["id"])
    assert client.get(f"/api/products/{product['id']}").json()["account"]["nickname"] == "seller"
    assert client.get("/api/products").json()[0]["account"]["nickname"] == "seller"

    response = client.put(
        f"/api/accounts/{account['id']}",
        json={"nickname": "renamed", "firstName": "Alice", "lastName": "Smith", "email": "renamed@example.com"},
    )
    assert response.status_code == 200

    by_id = client.get(f"/api/products/{product['id']}").json()
    assert by_id["account"]["nickname"] == "renamed"
    assert by_id["account"]["email"] == "renamed@example.com"
    assert client.get("/api/products").json()[0]["account"]["nickname"] == "renamed"

    assert client.delete(f"/api/accounts/{account['id']}").status_code == 204

    orphaned = client.get(f"/api/products/{product['id']}").json()
    assert orphaned["accountId"] is None
    assert orphaned["account"] is None
    assert client.get("/api/products").json()[0]["accountId"] is None


def test_unrouted_api_paths_are_not_counted(client):
    assert client.get("/api/no-such-resource").status_code == 404
    assert client.post("/api/accounts/nickname/alice").status_code == 405

    counts = client.get("/api/number-of-requests").json()

    assert counts == {"general": 1, "GET": 1}
