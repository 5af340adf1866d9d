"""
Shared fixtures for the codepoet test suite.
"""

import pytest

from codepoet.codegen.core.config import GeneratorConfig
from codepoet.codegen.core.keywords import Construct
from codepoet.codegen.core.type_name import DOUBLE, INTEGER
from codepoet.codegen.specs import FieldSpec, MethodSpec, ParameterSpec, TypeSpec


@pytest.fixture
def pinned_config():
    """Configuration with a fixed header date so output is reproducible."""
    return GeneratorConfig(header_date="2024-01-31")


@pytest.fixture
def point_type():
    """A small struct with two stored fields and one method."""
    other = ParameterSpec.builder("other", "Point").build()
    distance = (
        MethodSpec.builder("distance")
        .add_parameter(other)
        .add_return_type(DOUBLE)
        .add_code(["let dx = x - other.x", "return Double(dx)"])
        .build()
    )
    return (
        TypeSpec.builder("Point", Construct.STRUCT)
        .add_modifier("public")
        .add_protocol("Equatable")
        .add_field(FieldSpec.builder("x", INTEGER).build())
        .add_field(FieldSpec.builder("y", INTEGER).build())
        .add_method(distance)
        .build()
    )


@pytest.fixture
def point_model():
    """JSON model describing the same struct as ``point_type``."""
    return {
        "framework": "Geometry",
        "types": [
            {
                "name": "Point",
                "kind": "struct",
                "modifiers": ["public"],
                "protocols": ["Equatable"],
                "fields": [
                    {"name": "x", "type": "Int"},
                    {"name": "y", "type": "Int"},
                ],
                "methods": [
                    {
                        "name": "distance",
                        "parameters": [{"name": "other", "type": "Point"}],
                        "returns": "Double",
                        "body": ["let dx = x - other.x", "return Double(dx)"],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def point_source():
    """Expected rendering of ``point_type``."""
    return (
        "public struct Point: Equatable {\n"
        "    let x: Int\n"
        "    let y: Int\n"
        "\n"
        "    /**\n"
        "        :param:    other\n"
        "    */\n"
        "    func distance(other: Point) -> Double {\n"
        "        let dx = x - other.x\n"
        "        return Double(dx)\n"
        "    }\n"
        "}"
    )
