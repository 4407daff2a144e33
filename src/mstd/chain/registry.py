"""
Registry — функции и transformers, доступные host evaluator

Transformer вызывается postfix на receiver: receiver передаётся первым
аргументом (явный `applied`), затем explicit args. Результат становится
receiver следующего звена chain.

Dispatch по receiver kind:
- имя может иметь несколько реализаций (length / reverse для TEXT и SEQUENCE)
- сначала ищется реализация для точного kind, затем для ANY
"""

import logging
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Callable, Iterable

from mstd.errors import UnknownFunctionError, UnknownTransformerError

logger = logging.getLogger(__name__)


# =============================================================================
# RECEIVER KIND
# =============================================================================


class ReceiverKind(str, Enum):
    """Вид receiver для dispatch transformers."""

    NUMBER = "number"
    TEXT = "text"
    SEQUENCE = "sequence"
    BOOLEAN = "boolean"
    OTHER = "other"
    ANY = "any"


def receiver_kind(value: Any) -> ReceiverKind:
    """
    Определение kind для значения.

    bool проверяется раньше чисел: True не считается Scalar.
    """
    if isinstance(value, bool):
        return ReceiverKind.BOOLEAN
    if isinstance(value, Real):
        return ReceiverKind.NUMBER
    if isinstance(value, str):
        return ReceiverKind.TEXT
    if isinstance(value, (tuple, list)):
        return ReceiverKind.SEQUENCE
    return ReceiverKind.OTHER


# =============================================================================
# TRANSFORMER BINDING
# =============================================================================


@dataclass(frozen=True)
class TransformerBinding:
    """
    Transient пара (receiver, args) на время вычисления одного звена.

    Не сохраняется после вызова; receiver доступен только на чтение.
    """

    name: str
    receiver: Any
    args: tuple

    def evaluate(self, func: Callable[..., Any]) -> Any:
        return func(self.receiver, *self.args)


# =============================================================================
# REGISTRY
# =============================================================================


class Registry:
    """
    Таблица функций и transformers.

    Заполняется при загрузке library modules (см. mstd.modules) и
    пользовательскими регистрациями через декораторы.
    """

    def __init__(self):
        self._functions: dict[str, Callable[..., Any]] = {}
        self._transformers: dict[str, dict[ReceiverKind, Callable[..., Any]]] = {}
        self._loaded_modules: set[str] = set()

    # -------------------------------------------------------------------------
    # Регистрация
    # -------------------------------------------------------------------------

    def register_function(self, name: str, func: Callable[..., Any]) -> None:
        self._functions[name] = func
        logger.debug("Registered function %s", name)

    def register_transformer(
        self,
        name: str,
        func: Callable[..., Any],
        kinds: Iterable[ReceiverKind] = (ReceiverKind.ANY,),
    ) -> None:
        """
        Регистрация transformer для одного или нескольких receiver kinds.

        Повторная регистрация того же (name, kind) заменяет реализацию.
        """
        by_kind = self._transformers.setdefault(name, {})
        for kind in kinds:
            by_kind[kind] = func
            logger.debug("Registered transformer %s for %s", name, kind.value)

    def function(self, name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Декоратор: @registry.function("name")."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register_function(name, func)
            return func

        return decorator

    def transformer(
        self, name: str, *kinds: ReceiverKind
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """
        Декоратор: @registry.transformer("add", ReceiverKind.NUMBER).

        Без kinds transformer регистрируется для ANY.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register_transformer(name, func, kinds or (ReceiverKind.ANY,))
            return func

        return decorator

    # -------------------------------------------------------------------------
    # Модули
    # -------------------------------------------------------------------------

    def is_loaded(self, module_name: str) -> bool:
        return module_name in self._loaded_modules

    def mark_loaded(self, module_name: str) -> None:
        self._loaded_modules.add(module_name)

    @property
    def loaded_modules(self) -> frozenset[str]:
        return frozenset(self._loaded_modules)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def has_function(self, name: str) -> bool:
        return name in self._functions

    def has_transformer(self, name: str, kind: ReceiverKind | None = None) -> bool:
        by_kind = self._transformers.get(name, {})
        if kind is None:
            return bool(by_kind)
        return kind in by_kind or ReceiverKind.ANY in by_kind

    def resolve_function(self, name: str) -> Callable[..., Any]:
        """
        Raises:
            UnknownFunctionError: Если функция не зарегистрирована
        """
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunctionError(name) from None

    def resolve_transformer(self, name: str, receiver: Any) -> Callable[..., Any]:
        """
        Поиск реализации transformer для receiver.

        Raises:
            UnknownTransformerError: Если нет реализации ни для kind, ни для ANY
        """
        kind = receiver_kind(receiver)
        by_kind = self._transformers.get(name, {})

        func = by_kind.get(kind) or by_kind.get(ReceiverKind.ANY)
        if func is None:
            raise UnknownTransformerError(name, kind.value)
        return func

    # -------------------------------------------------------------------------
    # Вызовы
    # -------------------------------------------------------------------------

    def call(self, name: str, *args: Any) -> Any:
        """Вызов функции с позиционными аргументами."""
        return self.resolve_function(name)(*args)

    def apply(self, receiver: Any, name: str, *args: Any) -> Any:
        """
        Одно звено chain: receiver.name(*args).

        Ошибки тела transformer пропагируют без обёртки.
        """
        func = self.resolve_transformer(name, receiver)
        binding = TransformerBinding(name=name, receiver=receiver, args=args)
        return binding.evaluate(func)
