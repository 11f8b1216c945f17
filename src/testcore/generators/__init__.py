"""Generator registry and name-based dispatch."""

from __future__ import annotations

from typing import Any, Callable

from testcore.utils.random_source import UniformSource

Generator = Callable[..., Any]


class GeneratorRegistry:
    """Registry of per-domain generator functions, keyed by domain name."""

    _generators: dict[str, Generator] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[Generator], Generator]:
        def decorator(fn: Generator) -> Generator:
            cls._generators[name] = fn
            return fn
        return decorator

    @classmethod
    def get(cls, name: str) -> Generator | None:
        return cls._generators.get(name)

    @classmethod
    def all_generators(cls) -> dict[str, Generator]:
        return dict(cls._generators)


def generate(source: UniformSource, name: str, *args: Any) -> Any:
    """Generate one value for the domain registered as `name`.

    Extra positional arguments are passed through, so
    ``generate(src, "uint8", 10, 20)`` is ``next_byte(src, 10, 20)``.
    """
    fn = GeneratorRegistry.get(name)
    if fn is None:
        raise KeyError(f"Unknown value domain: {name!r}")
    return fn(source, *args)
