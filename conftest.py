"""Root conftest: test settings must be in the environment before imports."""
from __future__ import annotations

import os
from pathlib import Path

_env_test = Path(__file__).resolve().parent / ".env.test"

for line in _env_test.read_text().splitlines():
    key, sep, value = line.strip().partition("=")
    if sep and not key.startswith("#"):
        os.environ.setdefault(key.strip(), value.strip())
