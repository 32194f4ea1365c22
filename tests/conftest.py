"""Test configuration and fixtures."""

import os

# Settings are read from the environment when the container first needs them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")  # Minimum cost keeps hashing fast
