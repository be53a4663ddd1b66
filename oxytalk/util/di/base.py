"""Provider base class and production/in-memory selection."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Components with an in-memory stand-in
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for OxyTalk providers.

    A provider that sets ``__mock_component__`` and has subclasses is a
    swappable component: one subclass is the production implementation and
    one sets ``__is_mock__ = True``. Anything else is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_component(cls) -> bool:
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider listed in PROVIDERS to the class to instantiate.

    Raises:
        ValueError: If the component has no implementation of the requested kind
            (the in-memory one lives under tests/ and must be imported first)
    """
    if not base.is_component():
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "in-memory" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
