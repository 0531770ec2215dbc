import os
import sys

# Make `srs_api`, `wkt` and `tests.*` importable when pytest runs from the repo root
BACKEND_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)
