"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from graphreview.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build the container with every production implementation.

    Settings are read from the environment when first requested.
    """
    providers = [base.select_implementation(mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use ``FromDishka``."""
    setup_dishka(container, app)
