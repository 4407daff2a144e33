"""
Numeric Primitives — скалярная арифметика и скалярные transformers

Модуль содержит:
- Функции: absolute, maximum, minimum, power, factorial, is_even, is_odd
- Transformer forms (receiver первым аргументом `applied`):
  absolute, square, cube, sqrt, negate, increment, decrement

Все операции чистые: без side effects, без shared state.

ЗАДОКУМЕНТИРОВАННЫЕ ГРАНИЦЫ (сохраняются как есть):
1. factorial(n) для n <= 1 (включая отрицательные) возвращает 1
2. power(base, exponent) с отрицательным exponent возвращает 1 (ноль итераций)
3. sqrt() выполняет ровно SQRT_ITERATIONS итераций Newton's method, без early-exit
4. sqrt() для applied <= 0 возвращает 0 (не ошибка)
"""

from numbers import Real

from mstd.config import SQRT_ITERATIONS

Scalar = int | float


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def as_count(value: Real, name: str, operation: str) -> int:
    """
    Приведение числа к целому счётчику итераций.

    Принимает int и float с целым значением (3.0 → 3).

    Args:
        value: Исходное значение
        name: Имя параметра (для сообщения об ошибке)
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        Целое значение

    Raises:
        TypeError: Если значение не целое число

    Examples:
        >>> as_count(3, "times", "repeat")
        3
        >>> as_count(3.0, "times", "repeat")
        3
    """
    if isinstance(value, bool):
        raise TypeError(f"{operation}: {name} must be an integral number, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeError(f"{operation}: {name} must be an integral number, got {value!r}")


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def absolute(x: Scalar) -> Scalar:
    """
    Модуль числа.

    Используется и как функция abs(x), и как transformer x.abs().
    """
    if x < 0:
        return -x
    return x


def maximum(a: Scalar, b: Scalar) -> Scalar:
    """Большее из двух значений (при равенстве возвращается b)."""
    if a > b:
        return a
    return b


def minimum(a: Scalar, b: Scalar) -> Scalar:
    """Меньшее из двух значений (при равенстве возвращается b)."""
    if a < b:
        return a
    return b


def power(base: Scalar, exponent: int) -> Scalar:
    """
    Возведение в целую неотрицательную степень повторным умножением.

    exponent == 0 → 1 для любого base (включая 0).
    Отрицательный exponent не поддерживается: цикл выполняется ноль раз и
    результат равен 1. Это задокументированная граница, а не ошибка.

    Args:
        base: Основание
        exponent: Целый показатель (int или float с целым значением)

    Returns:
        base ** exponent для exponent >= 0, иначе 1

    Raises:
        TypeError: Если exponent не целое число

    Examples:
        >>> power(2, 10)
        1024
        >>> power(0, 0)
        1
        >>> power(5, -2)
        1
    """
    count = as_count(exponent, "exponent", "pow")

    if count == 0:
        return 1

    result = 1
    for _ in range(count):
        result = result * base
    return result


def factorial(n: int) -> int:
    """
    Итеративный factorial.

    n <= 1 → 1, в том числе для отрицательных n (граница сохраняется).
    Иначе произведение по [2, n].

    Raises:
        TypeError: Если n не целое число (проверяется до ветки n <= 1)

    Examples:
        >>> factorial(5)
        120
        >>> factorial(-3)
        1
    """
    upper = as_count(n, "n", "factorial")

    if upper <= 1:
        return 1

    result = 1
    for i in range(2, upper + 1):
        result = result * i
    return result


def is_even(n: Scalar) -> bool:
    return (n % 2) == 0


def is_odd(n: Scalar) -> bool:
    return (n % 2) != 0


# =============================================================================
# TRANSFORMERS
# =============================================================================


def square(applied: Scalar) -> Scalar:
    return applied * applied


def cube(applied: Scalar) -> Scalar:
    return applied * applied * applied


def sqrt(applied: Scalar) -> Scalar:
    """
    Приближение квадратного корня методом Newton'а.

    Начальное приближение y = applied, затем ровно SQRT_ITERATIONS итераций:
        y ← (y + x / y) / 2
    без проверки сходимости. Для больших x десяти итераций недостаточно,
    и результат заметно отличается от точного корня, это контракт.

    Args:
        applied: Receiver (скаляр)

    Returns:
        Приближение sqrt(applied); 0 если applied <= 0

    Examples:
        >>> abs(sqrt(4) - 2.0) < 1e-12
        True
        >>> sqrt(-9)
        0
    """
    if applied <= 0:
        return 0

    x = applied
    y = applied
    for _ in range(SQRT_ITERATIONS):
        y = (y + x / y) / 2
    return y


def negate(applied: Scalar) -> Scalar:
    return -applied


def increment(applied: Scalar) -> Scalar:
    return applied + 1


def decrement(applied: Scalar) -> Scalar:
    return applied - 1
