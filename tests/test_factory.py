import pytest

from declsynth.core import (
    ArrayLiteral,
    BooleanLiteral,
    Identifier,
    ImportExportItem,
    NullLiteral,
    NumericLiteral,
    ObjectLiteral,
    PropertyAssignment,
    StringLiteral,
    TypeReference,
    factory,
)


def test_literal_scalars():
    assert factory.literal(None) == NullLiteral()
    assert factory.literal(True) == BooleanLiteral(True)
    assert factory.literal(3) == NumericLiteral(3)
    assert factory.literal(2.5) == NumericLiteral(2.5)
    assert factory.literal("b") == StringLiteral("b")


def test_literal_containers():
    node = factory.literal({"ids": [1, 2], "name": "pet"})

    assert node == ObjectLiteral(
        (
            PropertyAssignment(
                "ids", ArrayLiteral((NumericLiteral(1), NumericLiteral(2)))
            ),
            PropertyAssignment("name", StringLiteral("pet")),
        )
    )


def test_literal_passes_expressions_through():
    ref = factory.identifier("baseUrl")

    assert factory.literal({"url": ref}).properties[0].initializer is ref


def test_literal_rejects_unknown_values():
    with pytest.raises(TypeError):
        factory.literal(object())


def test_member_access_requires_name():
    with pytest.raises(ValueError):
        factory.member_access("client")


def test_type_reference_arguments():
    node = factory.type_reference("Record", ["string", TypeReference("Pet")])

    assert node == TypeReference("Record", (TypeReference("string"), TypeReference("Pet")))


def test_items():
    assert factory.export_item("A", alias="B", as_type=True) == ImportExportItem(
        "A", "B", True
    )
    assert factory.import_item("a") == ImportExportItem("a")
    assert factory.identifier("x") == Identifier("x")
    assert factory.string("x") == StringLiteral("x")
