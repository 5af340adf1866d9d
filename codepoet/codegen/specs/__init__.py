"""
Specs: immutable descriptions of program constructs that render themselves.
"""

from .base import PoetSpec, SpecBuilder, SpecError
from .field import FieldSpec, FieldSpecBuilder
from .file import PoetFile
from .method import MethodSpec, MethodSpecBuilder
from .model import ModelError, load_model
from .parameter import ParameterSpec, ParameterSpecBuilder
from .type_spec import TypeSpec, TypeSpecBuilder

__all__ = [
    "PoetSpec",
    "SpecBuilder",
    "SpecError",
    "ParameterSpec",
    "ParameterSpecBuilder",
    "FieldSpec",
    "FieldSpecBuilder",
    "MethodSpec",
    "MethodSpecBuilder",
    "TypeSpec",
    "TypeSpecBuilder",
    "PoetFile",
    "ModelError",
    "load_model",
]
