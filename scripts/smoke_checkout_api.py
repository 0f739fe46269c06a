#!/usr/bin/env python3
"""
Smoke test for the checkout gateway API.

Start the API first (in another terminal), in mock mode unless you have real
Mercado Pago test credentials:
  INTEGRATIONS_MODE=mock uvicorn src.api.main:app --host 127.0.0.1 --port 8081

Then install the script extra and run this script:
  pip install -e ".[scripts]"
  python scripts/smoke_checkout_api.py
  python scripts/smoke_checkout_api.py --base-url http://127.0.0.1:8081 --client-id ID --client-secret SECRET
"""

from __future__ import annotations

import argparse
import os
import sys

import requests

SAMPLE_PREFERENCE = {
    "items": [
        {
            "title": "Libro Sherlock Holmes 1era edicion",
            "description": "Nuevo libro de sherlock holmes 2020",
            "quantity": 1,
            "unit_price": 150.70,
        }
    ],
    "payer": {
        "name": "Jane",
        "surname": "Buyer",
        "email": "jane@example.com",
        "phone": {"area_code": "11", "number": "11111111"},
        "address": {"zip_code": "1414", "street": "Corrientes", "number": 4789},
        "date_created": "14-06-2020",
    },
    "back_urls": {
        "success": "https://shop.example.com/success",
        "pending": "https://shop.example.com/pending",
        "failure": "https://shop.example.com/failure",
    },
    "auto_return": True,
}


def get_text(url: str, params=None, headers=None, timeout: int = 30) -> str:
    r = requests.get(url, params=params, headers=headers, timeout=timeout)
    r.raise_for_status()
    return r.text


def post_json(url: str, data, headers=None, timeout: int = 30) -> str:
    r = requests.post(url, json=data, headers=headers, timeout=timeout)
    r.raise_for_status()
    return r.text


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test the checkout gateway API")
    parser.add_argument("--base-url", default="http://localhost:8081", help="API base URL")
    parser.add_argument("--client-id", default=os.getenv("MERCADOPAGO_CLIENT_ID", "SMOKE_CLIENT_ID"))
    parser.add_argument("--client-secret", default=os.getenv("MERCADOPAGO_CLIENT_SECRET", "SMOKE_CLIENT_SECRET"))
    parser.add_argument("--status", default="approved", help="Payment status for /total_payments")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    print("=== Checkout gateway smoke test ===\n")
    print(f"Base URL: {base}\n")

    # 1) Liveness
    print("1) GET /ping")
    try:
        print(f"   {get_text(f'{base}/ping')}\n")
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: uvicorn src.api.main:app --host 127.0.0.1 --port 8081")
        return 1

    # 2) Token exchange
    print("2) GET /access_token")
    try:
        access_token = get_text(
            f"{base}/access_token",
            params={"client_id": args.client_id, "client_secret": args.client_secret},
        )
        print(f"   token: {access_token[:12]}...\n")
    except requests.RequestException as e:
        print(f"   FAIL: {e}\n")
        return 1

    headers = {"access_token": access_token}

    # 3) Checkout preference
    print("3) POST /preferences")
    try:
        checkout_url = post_json(f"{base}/preferences", SAMPLE_PREFERENCE, headers=headers)
        print(f"   checkout: {checkout_url}\n")
    except requests.RequestException as e:
        print(f"   FAIL: {e}\n")
        return 1

    # 4) Validation is enforced before the provider is called
    print("4) POST /preferences (empty items, expect 400)")
    r = requests.post(f"{base}/preferences", json={**SAMPLE_PREFERENCE, "items": []}, headers=headers, timeout=30)
    print(f"   status={r.status_code} body={r.text!r}\n")
    if r.status_code != 400:
        return 1

    # 5) Payment count
    print(f"5) GET /total_payments?status={args.status}")
    try:
        total = get_text(f"{base}/total_payments", params={"status": args.status}, headers=headers)
        print(f"   total: {total}\n")
    except requests.RequestException as e:
        print(f"   FAIL: {e}\n")
        return 1

    print("=== Checkout gateway smoke test completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
