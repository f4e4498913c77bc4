"""Test container with mocked infrastructure."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from graphreview.util.di import PROVIDERS, Component


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where swappable components are mocked.

    Args:
        unmock: Components that should use their production implementation,
            e.g. ``{"persistence"}`` for tests against a real PostgreSQL

    Returns:
        Container that can also back a FastAPI ``TestClient``

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    known = {base.__mock_component__ for base in PROVIDERS if base.is_swappable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        base.select_implementation(mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
