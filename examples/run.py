"""Serve examples/public behind Basic authentication.

Usage (from the project root):
    python examples/run.py

Credentials come from HTTPAUTH_USERS (comma-separated USER:PASSWORD pairs),
defaulting to demo:demo.

Then test with curl:
    curl http://localhost:8000/health             # 200 (exempt)
    curl http://localhost:8000/                   # 401 (no credentials)
    curl -u demo:demo http://localhost:8000/      # 200
"""

import os

from httpauth import serve
from httpauth._utils import parse_credentials, split_env_credentials

credentials = parse_credentials(split_env_credentials(os.environ.get("HTTPAUTH_USERS", "demo:demo")))
print(f"Users: {', '.join(sorted(credentials))}")

serve(
    "./examples/public",
    credentials=credentials,
    host="127.0.0.1",
    port=8000,
    realm="httpauth demo",
)
