"""Base classes for dependency injection providers.

Providers for infrastructure the tests swap out (email delivery, storage)
are declared as an abstract base with two subclasses, one flagged
``__is_mock__``. Everything else is a single concrete provider.
"""

from typing import ClassVar, Literal, Type

from dishka import Provider

Component = Literal["email", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name of a swappable provider, None otherwise
        __is_mock__: Whether this is the mock implementation of its component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def select_implementation(cls, mock: bool = False) -> Type["ProviderBase"]:
        """Pick the provider class to instantiate for this base.

        Concrete providers return themselves regardless of ``mock``.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        if not cls.is_swappable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == mock:
                return subclass

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
