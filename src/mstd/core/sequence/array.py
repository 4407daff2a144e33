"""
Immutable Sequence Core — построение, indexed get, rebuild-by-index, агрегаты

Sequence представлена tuple. Операции принимают любой list/tuple и ВСЕГДА
возвращают новый tuple; входная sequence никогда не изменяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. array_set возвращает новую sequence той же длины, ровно один элемент заменён
2. Индекс вне [0, length) → SequenceIndexError (подкласс IndexError)
3. average() пустой sequence → 0 (без деления на ноль)
"""

from typing import Any

from mstd.core.math.numeric import Scalar, as_count
from mstd.errors import SequenceIndexError


# =============================================================================
# ПОСТРОЕНИЕ И ДОСТУП
# =============================================================================


def create_array(size: int, default_value: Any) -> tuple:
    """
    Sequence из size элементов, каждый равен default_value.

    Строится повторным append от пустой sequence; size <= 0 → ().

    Examples:
        >>> create_array(3, 0)
        (0, 0, 0)
        >>> create_array(-1, 0)
        ()
    """
    count = as_count(size, "size", "create_array")

    result: tuple = ()
    for _ in range(count):
        result = result + (default_value,)
    return result


def array_get(seq: tuple | list, index: int) -> Any:
    """
    Элемент по индексу.

    Отрицательные индексы не поддерживаются (нет wrap-around).

    Raises:
        SequenceIndexError: Если index вне [0, length)
        TypeError: Если index не целое число
    """
    idx = as_count(index, "index", "array_get")

    if idx < 0:
        raise SequenceIndexError("array_get", idx, len(seq))

    try:
        return seq[idx]
    except IndexError as e:
        raise SequenceIndexError("array_get", idx, len(seq)) from e


def array_set(seq: tuple | list, index: int, value: Any) -> tuple:
    """
    Rebuild-by-index: новая sequence с value на позиции index.

    Sequence перестраивается поэлементно; остальные элементы копируются
    из входа как есть (по ссылке).

    Args:
        seq: Исходная sequence (не изменяется)
        index: Позиция замены
        value: Новое значение

    Returns:
        Новый tuple той же длины

    Raises:
        SequenceIndexError: Если index вне [0, length)

    Examples:
        >>> array_set((1, 2, 3), 1, 9)
        (1, 9, 3)
    """
    idx = as_count(index, "index", "array_set")

    result: tuple = ()
    replaced = False
    for i, item in enumerate(seq):
        if i == idx:
            result = result + (value,)
            replaced = True
        else:
            result = result + (item,)

    if not replaced:
        raise SequenceIndexError("array_set", idx, len(result))

    return result


# =============================================================================
# TRANSFORMERS: ДЛИНА И АГРЕГАТЫ
# =============================================================================


def seq_length(applied: tuple | list) -> int:
    """Число элементов (полный проход)."""
    count = 0
    for _ in applied:
        count = count + 1
    return count


def seq_sum(applied: tuple | list) -> Scalar:
    """Сумма элементов; пустая sequence → 0."""
    total = 0
    for item in applied:
        total = total + item
    return total


def average(applied: tuple | list) -> Scalar:
    """
    Среднее за один проход.

    Пустая sequence → 0 (zero-guard вместо ZeroDivisionError).

    Examples:
        >>> average((1, 2, 3))
        2.0
        >>> average(())
        0
    """
    total = 0
    count = 0
    for item in applied:
        total = total + item
        count = count + 1

    if count == 0:
        return 0

    return total / count
