"""
Library modules — math, string, array, core

Загрузка модуля регистрирует его функции и transformers в Registry и
печатает одно подтверждение через print collaborator.
Модуль core сначала загружает math, string и array.

Повторная загрузка модуля в тот же Registry: no-op (без второго
подтверждения).
"""

import logging
import threading
from functools import partial
from typing import Callable, Final

from mstd.chain.registry import ReceiverKind, Registry
from mstd.config import LOAD_MESSAGES, load_config
from mstd.core import io
from mstd.core.math import numeric
from mstd.core.sequence import array, combinators
from mstd.core.text import strings

logger = logging.getLogger(__name__)

NUMBER: Final = (ReceiverKind.NUMBER,)
TEXT: Final = (ReceiverKind.TEXT,)
SEQUENCE: Final = (ReceiverKind.SEQUENCE,)


# =============================================================================
# MODULE LOADERS
# =============================================================================


def _load_math(registry: Registry, printer: io.Printer, announce: bool) -> None:
    registry.register_function("abs", numeric.absolute)
    registry.register_function("max", numeric.maximum)
    registry.register_function("min", numeric.minimum)
    registry.register_function("pow", numeric.power)
    registry.register_function("factorial", numeric.factorial)
    registry.register_function("is_even", numeric.is_even)
    registry.register_function("is_odd", numeric.is_odd)

    registry.register_transformer("abs", numeric.absolute, NUMBER)
    registry.register_transformer("square", numeric.square, NUMBER)
    registry.register_transformer("cube", numeric.cube, NUMBER)
    registry.register_transformer("sqrt", numeric.sqrt, NUMBER)
    registry.register_transformer("negate", numeric.negate, NUMBER)
    registry.register_transformer("increment", numeric.increment, NUMBER)
    registry.register_transformer("decrement", numeric.decrement, NUMBER)


def _load_string(registry: Registry, printer: io.Printer, announce: bool) -> None:
    registry.register_function("concat", strings.concat)
    registry.register_function("repeat", strings.repeat)

    registry.register_transformer("length", strings.text_length, TEXT)
    registry.register_transformer("reverse", strings.text_reverse, TEXT)
    registry.register_transformer("uppercase", strings.uppercase, TEXT)
    registry.register_transformer("lowercase", strings.lowercase, TEXT)
    registry.register_transformer("trim", strings.trim, TEXT)


def _load_array(registry: Registry, printer: io.Printer, announce: bool) -> None:
    registry.register_function("create_array", array.create_array)
    registry.register_function("array_get", array.array_get)
    registry.register_function("array_set", array.array_set)

    registry.register_transformer("length", array.seq_length, SEQUENCE)
    registry.register_transformer("sum", array.seq_sum, SEQUENCE)
    registry.register_transformer("average", array.average, SEQUENCE)
    registry.register_transformer("map", combinators.seq_map, SEQUENCE)
    registry.register_transformer("filter", combinators.seq_filter, SEQUENCE)
    registry.register_transformer("reverse", combinators.seq_reverse, SEQUENCE)
    registry.register_transformer("sort", combinators.seq_sort, SEQUENCE)


def _load_core(registry: Registry, printer: io.Printer, announce: bool) -> None:
    for dependency in ("math", "string", "array"):
        load_module(registry, dependency, printer=printer, announce=announce)

    registry.register_function("print", printer)
    registry.register_function("print_array", partial(io.print_array, printer=printer))
    registry.register_function("input", io.read_input)


_LOADERS: Final[dict[str, Callable[[Registry, io.Printer, bool], None]]] = {
    "math": _load_math,
    "string": _load_string,
    "array": _load_array,
    "core": _load_core,
}

MODULE_NAMES: Final[tuple[str, ...]] = tuple(_LOADERS)


# =============================================================================
# PUBLIC API
# =============================================================================


def load_module(
    registry: Registry,
    name: str,
    printer: io.Printer = io.default_printer,
    announce: bool | None = None,
) -> Registry:
    """
    Загрузка library module в registry.

    Args:
        registry: Целевой Registry
        name: Имя модуля ('math', 'string', 'array', 'core')
        printer: Print collaborator для подтверждения загрузки
        announce: Печатать ли подтверждение; None → из LibraryConfig

    Returns:
        Тот же registry (для цепочек вызовов)

    Raises:
        KeyError: Если модуль неизвестен
    """
    if name not in _LOADERS:
        raise KeyError(f"Unknown library module: {name!r}")

    if registry.is_loaded(name):
        logger.debug("Module %s already loaded, skipping", name)
        return registry

    if announce is None:
        announce = load_config().announce_loads

    _LOADERS[name](registry, printer, announce)

    registry.mark_loaded(name)
    logger.info("Loaded library module %s", name)

    if announce:
        printer(LOAD_MESSAGES[name])

    return registry


def new_registry(
    printer: io.Printer = io.default_printer,
    announce: bool | None = None,
) -> Registry:
    """Новый Registry с загруженным модулем core (и всеми его зависимостями)."""
    return load_module(Registry(), "core", printer=printer, announce=announce)


_DEFAULT_REGISTRY: Registry | None = None
_DEFAULT_REGISTRY_LOCK = threading.Lock()


def default_registry() -> Registry:
    """
    Общий Registry по умолчанию (ленивое создание, без подтверждений).

    Используется Chain и run_chain_document, если registry не передан явно.
    Создание защищено lock: первые вызовы из разных потоков получают один
    и тот же экземпляр.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_REGISTRY_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = new_registry(announce=False)
    return _DEFAULT_REGISTRY
