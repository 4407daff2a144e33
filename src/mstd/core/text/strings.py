"""
Text Primitives — операции над immutable строками

Функции: concat, repeat
Transformers: text_length, text_reverse, uppercase, lowercase, trim

uppercase / lowercase / trim: identity pass-through. Это задокументированное
ограничение библиотеки: receiver возвращается без изменений.
"""

from mstd.core.math.numeric import as_count


def concat(a: str, b: str) -> str:
    """a, затем b."""
    return a + b


def repeat(text: str, times: int) -> str:
    """
    Повторная конкатенация text с самим собой times раз.

    times <= 0 → пустая строка.

    Raises:
        TypeError: Если times не целое число

    Examples:
        >>> repeat("ab", 3)
        'ababab'
        >>> repeat("ab", 0)
        ''
    """
    count = as_count(times, "times", "repeat")

    result = ""
    for _ in range(count):
        result = result + text
    return result


def text_length(applied: str) -> int:
    """Число символов (полный проход)."""
    count = 0
    for _ in applied:
        count = count + 1
    return count


def text_reverse(applied: str) -> str:
    """
    Разворот строки prepend-аккумуляцией (без доступа по индексу).

    Examples:
        >>> text_reverse("abc")
        'cba'
    """
    result = ""
    for c in applied:
        result = c + result
    return result


# Inert transformers: receiver возвращается как есть


def uppercase(applied: str) -> str:
    return applied


def lowercase(applied: str) -> str:
    return applied


def trim(applied: str) -> str:
    return applied
