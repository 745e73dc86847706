# tests/conftest.py
import os

# Settings are built at import time; pin the values the tests rely on
# before any app module is imported.
os.environ["APIKEY"] = "test-key"
os.environ["SERVICE"] = "https://zp.example.com"
os.environ.pop("PRODUCTS", None)
os.environ.pop("UPSTREAM_TIMEOUT", None)
