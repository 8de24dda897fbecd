#!/usr/bin/env python3
"""
Seed script: creates users, categories and products via the API (no direct DB).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 20 --products 200
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000"

CATEGORIES = [
    ("Electronics", "#1E88E5", "laptop"),
    ("Home & Kitchen", "#8D6E63", "home"),
    ("Books", "#43A047", "book"),
    ("Office", "#FB8C00", "briefcase"),
    ("Audio", "#8E24AA", "headphones"),
]

PRODUCT_NAMES = [
    "MacBook Pro", "Mechanical keyboard", "Wireless mouse", "Bluetooth headphones",
    "27 inch monitor", "HD webcam", "Bluetooth speaker", "Phone charger", "USB-C cable",
    "Laptop stand", "Coffee maker", "Electric kettle", "Toaster", "Blender", "Air fryer",
    "Python programming book", "Web design book", "Smart watch", "Power bank",
    "External hard drive", "Memory card", "Multiport adapter", "Backpack", "Stylus",
    "Graphics tablet", "USB microphone", "Ring light", "Tripod", "Webcam 4K",
]

DESCRIPTIONS = [
    "Great for home office and remote work.",
    "High quality build and reliable performance.",
    "Popular choice for developers and designers.",
    "Ergonomic and comfortable for long sessions.",
    "Long battery life and fast charging.",
    None,
]


def random_product() -> dict:
    name = random.choice(PRODUCT_NAMES)
    if random.random() > 0.5:
        name = f"{name} {random.randint(1, 999)}"
    payload = {
        "name": name,
        "price": random.choice([0, 0.99, 4.99, 9.99, 19.99, 49.99, 99.99, 499.0]),
        "stock": random.randint(0, 250),
    }
    description = random.choice(DESCRIPTIONS)
    if description:
        payload["description"] = description
    return payload


def main():
    ap = argparse.ArgumentParser(description="Seed users, categories and products via API")
    ap.add_argument("--users", type=int, default=10, help="Number of users to create")
    ap.add_argument("--products", type=int, default=100, help="Number of products to create")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    counts = {"users": 0, "categories": 0, "products": 0}
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.users} users...")
        for i in range(args.users):
            r = client.post("/users", json={
                "username": f"user{i + 1}",
                "email": f"user{i + 1}@example.com",
                "password": "password123",
            })
            if r.status_code == 201:
                counts["users"] += 1
            elif r.status_code != 409:  # 409: already seeded
                errors.append(f"User {i + 1}: {r.status_code} {r.text[:80]}")

        print(f"Creating {len(CATEGORIES)} categories...")
        for name, color, icon in CATEGORIES:
            r = client.post("/categories", json={"name": name, "color": color, "icon": icon})
            if r.status_code == 201:
                counts["categories"] += 1
            elif r.status_code != 409:
                errors.append(f"Category {name}: {r.status_code} {r.text[:80]}")

        print(f"Creating {args.products} products...")
        for i in range(args.products):
            r = client.post("/products", json=random_product())
            if r.status_code == 201:
                counts["products"] += 1
            else:
                errors.append(f"Product {i + 1}: {r.status_code} {r.text[:80]}")
            if (i + 1) % 50 == 0:
                print(f"  ... {i + 1} products")

    print(
        f"\nDone. Users: {counts['users']}, Categories: {counts['categories']}, "
        f"Products: {counts['products']}"
    )
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
