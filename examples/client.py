"""Fetch the demo page served by examples/run.py with a signing client.

Usage (with examples/run.py running):
    python examples/client.py
"""

import httpx

from httpauth import BasicAuthSigner, SigningClient

with httpx.Client(base_url="http://127.0.0.1:8000") as http:
    client = SigningClient(http, BasicAuthSigner("demo", "demo"))
    response = client.get("/")
    print(response.status_code, response.text)
