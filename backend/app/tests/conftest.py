# Put backend/ (for the `app` package) and the repository root (for the codec
# packages) on sys.path so the service tests run from any directory.
import sys
from pathlib import Path

# tests/ -> app/ -> backend/ -> repo root
BACKEND_DIR = Path(__file__).resolve().parents[2]
ROOT_DIR = BACKEND_DIR.parent
for path in (BACKEND_DIR, ROOT_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
