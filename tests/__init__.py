"""Tests run against in-memory SQLite; settings must be set before offiswap is imported."""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "offiswap-test-secret-0123456789abcdef"
os.environ["BCRYPT_ROUNDS"] = "4"
