"""
Sequence Combinators — map, filter, reverse, sort

Все combinators строят новую sequence; receiver не изменяется.
Ошибки caller-supplied func / predicate пропагируют без изменений.

sort(): selection sort поверх immutable sequence:
- рабочая копия строится одним проходом (append)
- каждый swap = два вызова array_set (rebuild-by-index)
- при равных ключах побеждает первый найденный минимум
- O(n²) сравнений и O(n²) аллокаций sequence
"""

from typing import Any, Callable

from mstd.core.sequence.array import array_set


def seq_map(applied: tuple | list, func: Callable[[Any], Any]) -> tuple:
    """
    Новая sequence той же длины: func(element) для каждого элемента.

    Порядок сохраняется.

    Examples:
        >>> seq_map((1, 2, 3), lambda x: x * 10)
        (10, 20, 30)
    """
    result: tuple = ()
    for item in applied:
        result = result + (func(item),)
    return result


def seq_filter(applied: tuple | list, predicate: Callable[[Any], Any]) -> tuple:
    """
    Элементы, для которых predicate(element) truthy, в исходном порядке.

    Examples:
        >>> seq_filter((1, 2, 3, 4), lambda x: x % 2 == 0)
        (2, 4)
    """
    result: tuple = ()
    for item in applied:
        if predicate(item):
            result = result + (item,)
    return result


def seq_reverse(applied: tuple | list) -> tuple:
    """Обратный порядок через prepend-аккумуляцию."""
    result: tuple = ()
    for item in applied:
        result = (item,) + result
    return result


def seq_sort(applied: tuple | list) -> tuple:
    """
    Сортировка по возрастанию (selection sort через rebuild-by-index).

    Сравнение: стандартный порядок Python (`<`). Для несравнимых элементов
    TypeError пропагирует к вызывающему коду.

    Returns:
        Новый tuple: упорядоченная по возрастанию перестановка receiver

    Examples:
        >>> seq_sort((3, 1, 2))
        (1, 2, 3)
    """
    result: tuple = ()
    for item in applied:
        result = result + (item,)

    n = len(result)
    for i in range(n):
        min_idx = i
        min_val = result[i]

        for j in range(i + 1, n):
            if result[j] < min_val:
                min_idx = j
                min_val = result[j]

        if min_idx != i:
            displaced = result[i]
            result = array_set(result, i, min_val)
            result = array_set(result, min_idx, displaced)

    return result
