"""
I/O collaborators — print / input на границе с host

Библиотека сама ничего не печатает напрямую: все выводы идут через printer
(callable с одним аргументом), который передаёт host. Возвращаемое значение
printer игнорируется.
"""

from typing import Any, Callable

Printer = Callable[[Any], Any]


def default_printer(value: Any) -> None:
    """Printer по умолчанию: stdout."""
    print(value)


def print_array(seq: tuple | list, printer: Printer = default_printer) -> None:
    """
    Печать sequence по токенам: "[", затем каждый элемент и ",", затем "]".

    Один вызов printer на токен.
    """
    printer("[")
    for item in seq:
        printer(item)
        printer(",")
    printer("]")


def read_input(prompt: str) -> str:
    """
    Stub для input(prompt): всегда пустая строка.

    Интерактивный ввод является ответственностью host.
    """
    return ""
