"""
Chain documents — декларативная запись chain в JSON-совместимом виде

    {
        "receiver": [3, 1, 2],
        "links": [
            {"name": "filter", "args": [{"$fn": "is_odd"}]},
            {"name": "sort"}
        ]
    }

Документ проверяется JSON Schema контрактом (chain_document.json), затем
разбирается в immutable Pydantic модели и исполняется через apply_chain.

Преобразования значений:
- JSON arrays → tuple (Sequence)
- {"$fn": name} → зарегистрированная функция из Registry
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from mstd.chain.chain import apply_chain, resolve_registry
from mstd.chain.registry import Registry
from mstd.contracts import validate_chain_document

FUNCTION_REF_KEY = "$fn"


class ChainLink(BaseModel):
    """Одно звено: имя transformer и explicit args."""

    name: str = Field(..., min_length=1, description="Имя transformer")
    args: tuple[Any, ...] = Field(default=(), description="Explicit аргументы звена")

    model_config = {"frozen": True}


class ChainDocument(BaseModel):
    """Receiver и упорядоченные звенья chain."""

    receiver: Any = Field(..., description="Начальный receiver")
    links: tuple[ChainLink, ...] = Field(default=(), description="Звенья слева направо")

    model_config = {"frozen": True}


def parse_chain_document(data: Dict[str, Any]) -> ChainDocument:
    """
    Валидация по контракту и разбор документа.

    Raises:
        jsonschema.ValidationError: Документ не соответствует контракту
    """
    validate_chain_document(data)
    return ChainDocument.model_validate(data)


def _to_value(raw: Any, registry: Registry) -> Any:
    if isinstance(raw, dict) and FUNCTION_REF_KEY in raw:
        return registry.resolve_function(raw[FUNCTION_REF_KEY])
    if isinstance(raw, (list, tuple)):
        return tuple(_to_value(item, registry) for item in raw)
    return raw


def run_chain_document(
    data: Dict[str, Any] | ChainDocument,
    registry: Registry | None = None,
) -> Any:
    """
    Исполнение chain-документа.

    Args:
        data: dict по контракту chain_document или готовый ChainDocument
        registry: Registry (по умолчанию общий)

    Returns:
        Результат последнего звена

    Raises:
        jsonschema.ValidationError: dict не соответствует контракту
        UnknownFunctionError: {"$fn": ...} ссылается на незарегистрированную функцию
        UnknownTransformerError: звено не найдено для receiver kind
    """
    document = data if isinstance(data, ChainDocument) else parse_chain_document(data)
    reg = resolve_registry(registry)

    receiver = _to_value(document.receiver, reg)
    links = [
        (link.name, tuple(_to_value(arg, reg) for arg in link.args))
        for link in document.links
    ]
    return apply_chain(receiver, links, reg)
