#!/usr/bin/env python3
"""
Send a contact to a running sync service, the way the iOS Shortcut does.

Start the API first (in another terminal):
  uvicorn src.api.main:app --host 127.0.0.1 --port 8000

Then run this script:
  python scripts/send_contact.py scripts/sample_contact.json
  python scripts/send_contact.py contact.json --base-url http://127.0.0.1:8000 --password "$PASSWORD"

The file may hold a single contact object or the array the Shortcut sends.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, List

import requests

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass  # run without .env if python-dotenv not installed


def load_contacts(path: Path) -> List[Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return data if isinstance(data, list) else [data]


def main() -> int:
    parser = argparse.ArgumentParser(description="POST a contact file to /ios-contact")
    parser.add_argument("contact_file", type=Path, help="JSON file with a contact object or array")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--password", default=os.getenv("PASSWORD", ""), help="Shared secret (defaults to $PASSWORD)")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    if not args.contact_file.exists():
        print(f"File not found: {args.contact_file}")
        return 1

    contacts = load_contacts(args.contact_file)
    print(f"POST {base}/ios-contact ({len(contacts)} contact(s), only the first is synced)")
    try:
        r = requests.post(
            f"{base}/ios-contact",
            json=contacts,
            headers={"Authorization": args.password},
            timeout=30,
        )
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: uvicorn src.api.main:app --host 127.0.0.1 --port 8000")
        return 1

    print(f"   status: {r.status_code}")
    print(f"   body:   {r.text[:500]}")
    return 0 if r.status_code in (200, 201) else 1


if __name__ == "__main__":
    sys.exit(main())
