# ddf_api/deps.py
import time
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request

from ddf_api.errors import InternalError
from ddf_api.store import ListingStore


def get_store(request: Request) -> ListingStore:
    """
    FastAPI dependency returning the snapshot loaded at startup.
    The store hangs off the app instance, so each app (and each test) owns its own.
    """
    return request.app.state.store


def simulate_latency(request: Request) -> None:
    """Optional artificial delay for exercising frontend loading states. Off by default."""
    ms = request.app.state.settings.simulated_latency_ms
    if ms > 0:
        time.sleep(ms / 1000)


@contextmanager
def internal_errors(error: str) -> Iterator[None]:
    """Re-raise anything unexpected as InternalError carrying a user-facing label."""
    try:
        yield
    except InternalError:
        raise
    except Exception as e:
        raise InternalError(error, str(e)) from e
