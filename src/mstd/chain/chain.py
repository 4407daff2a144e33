"""
Chain — postfix-вызов transformers и композиция слева направо

    chain(5).square().add(10).value  → 35

Каждое звено получает receiver предыдущего звена первым аргументом;
никакого global / thread-local состояния. Chain immutable: каждый вызов
возвращает новый Chain.

Ошибка любого звена прерывает chain и пропагирует без обёртки.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence

from mstd.chain.registry import Registry

logger = logging.getLogger(__name__)

Link = tuple[str, Sequence[Any]]


def resolve_registry(registry: Registry | None = None) -> Registry:
    """Переданный registry или общий по умолчанию."""
    if registry is not None:
        return registry

    # Локальный импорт: modules зависит от chain.registry
    from mstd.modules import default_registry

    return default_registry()


@dataclass(frozen=True)
class Chain:
    """
    Fluent-обёртка над receiver.

    Атрибуты, не начинающиеся с "_", разрешаются как transformers через
    Registry: chain(x).name(*args) ≡ registry.apply(x, "name", *args).

    Note:
        Любое публичное имя возвращает link-callable, поэтому
        hasattr(chain(x), "anything") всегда True. Lookup выполняется только
        при вызове звена; для проверки наличия transformer используйте
        registry.has_transformer(name, receiver_kind(x)).
    """

    value: Any
    registry: Registry = field(default_factory=resolve_registry, repr=False, compare=False)

    def apply(self, name: str, *args: Any) -> "Chain":
        """Явная форма звена (для имён, совпадающих с атрибутами Chain)."""
        return Chain(_apply_link(self.registry, self.value, name, args), self.registry)

    def __getattr__(self, name: str) -> Callable[..., "Chain"]:
        if name.startswith("_"):
            raise AttributeError(name)

        def link(*args: Any) -> "Chain":
            return self.apply(name, *args)

        return link


def chain(value: Any, registry: Registry | None = None) -> Chain:
    """Начало chain с receiver value."""
    return Chain(value, resolve_registry(registry))


def apply_chain(
    receiver: Any,
    links: Iterable[Link],
    registry: Registry | None = None,
) -> Any:
    """
    Функциональная форма chain: receiver протягивается через links.

    Args:
        receiver: Начальный receiver
        links: Последовательность (name, args)
        registry: Registry (по умолчанию общий)

    Returns:
        Результат последнего звена (receiver, если links пуст)
    """
    reg = resolve_registry(registry)

    value = receiver
    for name, args in links:
        value = _apply_link(reg, value, name, tuple(args))
    return value


def _apply_link(registry: Registry, receiver: Any, name: str, args: tuple) -> Any:
    logger.debug("Applying %s%r to %r", name, args, receiver)
    try:
        return registry.apply(receiver, name, *args)
    except Exception:
        logger.debug("Chain link %s failed for receiver %r", name, receiver)
        raise
