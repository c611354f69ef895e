import sys, os

# Ensure the repo root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tests.helpers import FakeFetch, FakeResponse, RecordingView, make_payload

__all__ = [
    "FakeFetch",
    "FakeResponse",
    "RecordingView",
    "make_payload",
]
