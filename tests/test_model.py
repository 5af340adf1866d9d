"""
Tests for building specs from a JSON model description.
"""

import pytest

from codepoet.codegen.core.config import GeneratorConfig
from codepoet.codegen.core.keywords import Construct, Modifier
from codepoet.codegen.specs import ModelError, load_model


def test_top_level_types_become_files(point_model, point_source):
    files = load_model(point_model)

    assert len(files) == 1
    assert files[0].file_name == "Point"
    assert files[0].framework == "Geometry"
    assert files[0].render(GeneratorConfig(emit_header=False)) == point_source + "\n"


def test_files_group_types():
    model = {
        "imports": ["Foundation"],
        "files": [
            {
                "name": "Directions",
                "types": [
                    {
                        "name": "Direction",
                        "kind": "enum",
                        "super_type": "String",
                        "fields": [
                            {"name": "north", "initializer": '"N"'},
                            {"name": "south", "initializer": '"S"'},
                        ],
                    },
                    {
                        "name": "Compass",
                        "kind": "protocol",
                        "fields": [{"name": "heading", "type": "Direction", "kind": "var"}],
                        "methods": [{"name": "reset", "throws": True}],
                    },
                ],
            }
        ],
    }
    files = load_model(model, framework="Navigation")

    assert [f.file_name for f in files] == ["Directions"]
    assert files[0].framework == "Navigation"
    assert files[0].collect_imports() == {"Foundation"}

    direction, compass = files[0].spec_list
    assert direction.construct is Construct.ENUM
    assert compass.construct is Construct.PROTOCOL
    assert compass.methods[0].throws

    text = files[0].render(GeneratorConfig(emit_header=False))
    assert '    case north = "N"\n' in text
    assert "    var heading: Direction { get set }\n" in text
    assert "    func reset() throws\n" in text


def test_members_carry_details():
    model = {
        "types": [
            {
                "name": "Greeter",
                "modifiers": ["final", "public"],
                "description": "Says hello.",
                "methods": [
                    {
                        "name": "greet",
                        "modifiers": ["public"],
                        "type_variables": ["T"],
                        "parameters": [
                            {"name": "name", "type": "T", "label": "_", "default": "nil"}
                        ],
                        "returns": "String",
                        "body": ["return \"hi\""],
                    }
                ],
            }
        ]
    }
    (greeter_file,) = load_model(model)
    (greeter,) = greeter_file.spec_list

    assert greeter.construct is Construct.CLASS
    assert greeter.modifiers == {Modifier.FINAL, Modifier.PUBLIC}
    assert greeter.description == "Says hello."
    assert (
        "    public func greet<T>(_ name: T = nil) -> String {\n"
        '        return "hi"\n'
        "    }\n"
    ) in greeter.to_string() + "\n"


@pytest.mark.parametrize(
    "model, path",
    [
        ({}, "model"),
        ([], "model"),
        ({"types": [{"kind": "struct"}]}, "types[0]"),
        ({"types": [{"name": "A", "fields": [{"type": "Int"}]}]}, "types[0].fields[0]"),
        ({"types": [{"name": "A", "kind": "method"}]}, "types[0]"),
        ({"types": [{"name": "A", "modifiers": ["sometimes"]}]}, "types[0]"),
        ({"types": [{"name": "A", "fields": "x"}]}, "types[0].fields"),
        ({"files": [{"name": "Empty", "types": []}]}, "files[0]"),
        (
            {"types": [{"name": "A", "methods": [{"name": "f", "parameters": [{"name": "p"}]}]}]},
            "types[0].methods[0].parameters[0]",
        ),
        ({"types": [{"name": 5}]}, "types[0].name"),
        ({"types": [{"name": "A", "fields": [{"name": "x", "type": 5}]}]}, "types[0].fields[0].type"),
        ({"types": [{"name": "A", "methods": [{"name": "f", "body": 5}]}]}, "types[0].methods[0].body"),
        ({"types": [{"name": "A", "methods": [{"name": "f", "body": [1]}]}]}, "types[0].methods[0].body"),
        ({"types": [{"name": "A", "imports": [["Foundation"]]}]}, "types[0]"),
    ],
)
def test_invalid_models_name_the_path(model, path):
    with pytest.raises(ModelError, match=path.replace("[", r"\[").replace("]", r"\]")):
        load_model(model)
