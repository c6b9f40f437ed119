from wsdl_to_types.pipeline.analyzer import Declaration, DeclarationKind
from wsdl_to_types.pipeline.registry import TypeRegistry


def _declaration(name, target="string"):
    return Declaration(name=name, kind=DeclarationKind.ALIAS, alias_target=target)


def test_insertion_order():
    registry = TypeRegistry()
    for name in ["Zeta", "Alpha", "Mid"]:
        registry.register(_declaration(name))
    assert registry.names() == ["Zeta", "Alpha", "Mid"]
    assert [d.name for d in registry] == ["Zeta", "Alpha", "Mid"]
    assert len(registry) == 3


def test_lookup():
    registry = TypeRegistry()
    registry.register(_declaration("Foo"))
    assert "Foo" in registry
    assert "Bar" not in registry
    assert registry.get("Foo").alias_target == "string"
    assert registry.get("Bar") is None


def test_replacement_keeps_first_position():
    registry = TypeRegistry()
    registry.register(_declaration("Foo"))
    registry.register(_declaration("Bar"))
    registry.register(_declaration("Foo", target="number"))
    assert registry.names() == ["Foo", "Bar"]
    assert registry.get("Foo").alias_target == "number"
    assert len(registry) == 2
