"""
Тесты для Transformer Chaining

Покрывает:
- Registry: регистрация, dispatch по receiver kind, lookup ошибок
- Chain: композиция слева направо, immutability, пользовательские transformers
- apply_chain: функциональная форма
- Пропагация ошибок без обёртки и логирование упавшего звена
"""

import logging

import pytest

from mstd.chain import (
    Chain,
    ReceiverKind,
    Registry,
    TransformerBinding,
    apply_chain,
    chain,
    receiver_kind,
)
from mstd.errors import UnknownFunctionError, UnknownTransformerError
from mstd.modules import default_registry, new_registry


@pytest.fixture
def registry() -> Registry:
    """Registry с загруженным core и пользовательским add(n)."""
    reg = new_registry(printer=lambda value: None, announce=False)

    @reg.transformer("add", ReceiverKind.NUMBER)
    def add(applied, n):
        return applied + n

    return reg


# =============================================================================
# RECEIVER KIND / BINDING
# =============================================================================


class TestReceiverKind:
    """Тесты для receiver_kind"""

    def test_kinds(self) -> None:
        assert receiver_kind(5) == ReceiverKind.NUMBER
        assert receiver_kind(2.5) == ReceiverKind.NUMBER
        assert receiver_kind("abc") == ReceiverKind.TEXT
        assert receiver_kind((1, 2)) == ReceiverKind.SEQUENCE
        assert receiver_kind([1, 2]) == ReceiverKind.SEQUENCE
        assert receiver_kind(None) == ReceiverKind.OTHER

    def test_bool_is_not_number(self) -> None:
        assert receiver_kind(True) == ReceiverKind.BOOLEAN


class TestTransformerBinding:
    """Тесты для TransformerBinding"""

    def test_receiver_passed_first(self) -> None:
        binding = TransformerBinding(name="sub", receiver=10, args=(3,))
        assert binding.evaluate(lambda applied, n: applied - n) == 7

    def test_frozen(self) -> None:
        binding = TransformerBinding(name="x", receiver=1, args=())
        with pytest.raises(AttributeError):
            binding.receiver = 2  # type: ignore[misc]


# =============================================================================
# REGISTRY
# =============================================================================


class TestRegistry:
    """Тесты для Registry"""

    def test_dispatch_by_kind(self, registry: Registry) -> None:
        assert registry.apply("abc", "reverse") == "cba"
        assert registry.apply((1, 2, 3), "reverse") == (3, 2, 1)
        assert registry.apply("abcd", "length") == 4
        assert registry.apply((1, 2), "length") == 2

    def test_any_kind_fallback(self) -> None:
        reg = Registry()
        reg.register_transformer("identity", lambda applied: applied)

        assert reg.apply(5, "identity") == 5
        assert reg.apply("x", "identity") == "x"
        assert reg.has_transformer("identity", ReceiverKind.TEXT)

    def test_exact_kind_preferred_over_any(self) -> None:
        reg = Registry()
        reg.register_transformer("describe", lambda applied: "any")
        reg.register_transformer("describe", lambda applied: "number", (ReceiverKind.NUMBER,))

        assert reg.apply(1, "describe") == "number"
        assert reg.apply("a", "describe") == "any"

    def test_unknown_transformer(self, registry: Registry) -> None:
        with pytest.raises(UnknownTransformerError) as exc_info:
            registry.apply("abc", "sum")

        assert exc_info.value.name == "sum"
        assert exc_info.value.receiver_kind == "text"
        assert isinstance(exc_info.value, LookupError)

    def test_functions(self, registry: Registry) -> None:
        assert registry.call("pow", 2, 10) == 1024
        assert registry.call("factorial", 5) == 120
        assert registry.call("concat", "a", "b") == "ab"
        assert registry.call("array_set", (1, 2), 0, 5) == (5, 2)

    def test_unknown_function(self, registry: Registry) -> None:
        with pytest.raises(UnknownFunctionError, match="nope"):
            registry.call("nope")

    def test_function_decorator(self) -> None:
        reg = Registry()

        @reg.function("double")
        def double(x):
            return x * 2

        assert reg.has_function("double")
        assert reg.call("double", 4) == 8
        assert double(1) == 2


# =============================================================================
# CHAIN
# =============================================================================


class TestChain:
    """Тесты для Chain"""

    def test_square_then_add(self, registry: Registry) -> None:
        """5.square().add(10) → 35"""
        assert chain(5, registry).square().add(10).value == 35

    def test_left_to_right(self, registry: Registry) -> None:
        assert chain(3, registry).increment().square().value == 16
        assert chain(3, registry).square().increment().value == 10

    def test_sequence_pipeline(self, registry: Registry) -> None:
        result = (
            chain((5, 3, 8, 1, 4), registry)
            .filter(lambda x: x > 2)
            .map(lambda x: x * 2)
            .sort()
            .reverse()
            .value
        )
        assert result == (16, 10, 8, 6)

    def test_aggregate_ends_chain_on_scalar(self, registry: Registry) -> None:
        assert chain((1, 2, 3, 4), registry).sum().square().value == 100
        assert chain((), registry).average().increment().value == 1

    def test_sqrt_chain(self, registry: Registry) -> None:
        assert abs(chain(16, registry).sqrt().value - 4.0) < 1e-9
        assert chain(-16, registry).sqrt().value == 0

    def test_chain_is_immutable(self, registry: Registry) -> None:
        start = chain(5, registry)
        squared = start.square()

        assert start.value == 5
        assert squared.value == 25
        with pytest.raises(AttributeError):
            start.value = 6  # type: ignore[misc]

    def test_receiver_sequence_not_modified(self, registry: Registry) -> None:
        source = [3, 1, 2]
        chain(source, registry).sort().map(lambda x: -x)
        assert source == [3, 1, 2]

    def test_explicit_apply(self, registry: Registry) -> None:
        assert chain(2, registry).apply("cube").value == 8

    def test_private_attributes_not_resolved(self, registry: Registry) -> None:
        with pytest.raises(AttributeError):
            chain(1, registry)._hidden

    def test_any_public_name_is_link(self, registry: Registry) -> None:
        """hasattr всегда True; неизвестное звено падает только при вызове"""
        c = chain(1, registry)
        assert hasattr(c, "no_such_transformer")
        assert not registry.has_transformer("no_such_transformer", receiver_kind(1))
        with pytest.raises(UnknownTransformerError):
            c.no_such_transformer()

    def test_default_registry(self) -> None:
        assert isinstance(chain(1), Chain)
        assert chain(4).negate().value == -4
        assert chain(1).registry is default_registry()

    def test_inert_text_transformers(self, registry: Registry) -> None:
        assert chain("  Hi  ", registry).uppercase().trim().lowercase().value == "  Hi  "


class TestChainErrors:
    """Ошибки звеньев chain"""

    def test_map_error_propagates_unwrapped(self, registry: Registry) -> None:
        boom = RuntimeError("boom")

        def fail(x):
            raise boom

        with pytest.raises(RuntimeError) as exc_info:
            chain((1, 2), registry).map(fail).sum()

        assert exc_info.value is boom

    def test_later_links_not_executed(self, registry: Registry) -> None:
        calls = []

        @registry.transformer("record")
        def record(applied):
            calls.append(applied)
            return applied

        with pytest.raises(UnknownTransformerError):
            chain("abc", registry).sum().record()

        assert calls == []

    def test_index_error_in_chain(self, registry: Registry) -> None:
        with pytest.raises(IndexError):
            apply_chain((1, 2), [("map", (lambda x: registry.call("array_get", (1,), x),))], registry)

    def test_failed_link_logged(self, registry: Registry, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="mstd")

        with pytest.raises(ZeroDivisionError):
            chain((1, 0), registry).map(lambda x: 1 / x)

        assert "Chain link map failed" in caplog.text


class TestApplyChain:
    """Тесты для apply_chain"""

    def test_links(self, registry: Registry) -> None:
        links = [("square", ()), ("add", (10,))]
        assert apply_chain(5, links, registry) == 35

    def test_empty_links_returns_receiver(self, registry: Registry) -> None:
        assert apply_chain("x", [], registry) == "x"

    def test_matches_fluent_form(self, registry: Registry) -> None:
        links = [("reverse", []), ("sort", []), ("length", [])]
        seq = (4, 2, 9)
        assert apply_chain(seq, links, registry) == chain(seq, registry).reverse().sort().length().value
