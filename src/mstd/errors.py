"""
Errors — таксономия исключений mstd

Все операции библиотеки чистые и детерминированные, поэтому retry-политик нет:
ошибка прерывает текущее звено chain и пропагирует к вызывающему коду.

Классы:
- StdlibError: базовый класс всех ошибок библиотеки
- SequenceIndexError: индекс вне [0, length) в array_get / array_set
- UnknownTransformerError: transformer не найден для данного receiver kind
- UnknownFunctionError: функция не зарегистрирована

Ошибки caller-supplied callables (map / filter) НЕ оборачиваются: они
пропагируют без изменений.
"""


class StdlibError(Exception):
    """Базовое исключение mstd."""

    pass


class SequenceIndexError(StdlibError, IndexError):
    """
    Индекс вне диапазона [0, length) при indexed get / rebuild-by-index.

    Наследуется от IndexError, поэтому `except IndexError` продолжает работать.

    Attributes:
        operation: Имя операции, в которой произошла ошибка ('array_get', 'array_set')
        index: Запрошенный индекс
        length: Длина sequence
    """

    def __init__(self, operation: str, index: int, length: int):
        self.operation = operation
        self.index = index
        self.length = length
        super().__init__(
            f"{operation}: index {index} out of range for sequence of length {length}"
        )


class UnknownTransformerError(StdlibError, LookupError):
    """Transformer с таким именем не зарегистрирован для receiver kind."""

    def __init__(self, name: str, receiver_kind: str):
        self.name = name
        self.receiver_kind = receiver_kind
        super().__init__(f"Undefined transformer '{name}' for receiver kind {receiver_kind}")


class UnknownFunctionError(StdlibError, LookupError):
    """Функция с таким именем не зарегистрирована."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined function '{name}'")
