"""
Tests for sugarscan.schema module.

Tests the descriptor records and the append-only builder.
"""

import dataclasses

import pytest

from sugarscan.schema import DescriptorBuilder, MethodDescriptor, Parameter


class TestDescriptorBuilder:
    """Tests for the DescriptorBuilder class."""

    def test_parameters_get_positional_names(self):
        """Placeholders are 1-based and follow declaration order."""
        builder = DescriptorBuilder("lib.Matchers", "between", "lib.Matcher")
        builder.add_parameter("int")
        builder.add_parameter("float")

        descriptor = builder.build()
        assert descriptor.parameters == (
            Parameter("int", "param1"),
            Parameter("float", "param2"),
        )

    def test_add_parameter_returns_parameter(self):
        builder = DescriptorBuilder("lib.Matchers", "m", "lib.Matcher")
        assert builder.add_parameter("str") == Parameter("str", "param1")

    def test_build_preserves_order(self):
        builder = DescriptorBuilder("lib.Matchers", "m", "lib.Matcher")
        builder.add_type_parameter("U")
        builder.add_type_parameter("T extends Sized")
        builder.add_exception("KeyError")
        builder.add_exception("ValueError")

        descriptor = builder.build()
        assert descriptor.type_parameters == ("U", "T extends Sized")
        assert descriptor.exceptions == ("KeyError", "ValueError")

    def test_generic_return_element_defaults_to_none(self):
        builder = DescriptorBuilder("lib.Matchers", "anything", "lib.Matcher")
        assert builder.build().generic_return_element is None

        builder.set_generic_return_element("str")
        assert builder.build().generic_return_element == "str"

    def test_built_descriptor_is_independent(self):
        """Appending after build() does not change an earlier descriptor."""
        builder = DescriptorBuilder("lib.Matchers", "m", "lib.Matcher")
        builder.add_parameter("int")
        first = builder.build()

        builder.add_parameter("str")
        assert len(first.parameters) == 1
        assert len(builder.build().parameters) == 2


class TestMethodDescriptor:
    """Tests for the MethodDescriptor dataclass."""

    @pytest.fixture
    def descriptor(self):
        return MethodDescriptor(
            declaring_type_name="lib.Matchers",
            method_name="has_length",
            return_type_name="lib.Matcher",
            generic_return_element="S",
            type_parameters=("S extends Sized",),
            parameters=(Parameter("int", "param1"),),
            exceptions=("ValueError",),
        )

    def test_is_frozen(self, descriptor):
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.method_name = "other"

    def test_equality(self, descriptor):
        same = dataclasses.replace(descriptor)
        assert same == descriptor
        assert hash(same) == hash(descriptor)

    def test_qualified_name(self, descriptor):
        assert descriptor.qualified_name == "lib.Matchers.has_length"

    def test_signature(self, descriptor):
        assert descriptor.signature() == (
            "<S extends Sized> lib.Matcher[S] has_length(int param1) raises ValueError"
        )

    def test_signature_minimal(self):
        descriptor = MethodDescriptor("lib.Matchers", "anything", "lib.Matcher")
        assert descriptor.signature() == "lib.Matcher anything()"

    def test_to_dict(self, descriptor):
        assert descriptor.to_dict() == {
            "declaring_type_name": "lib.Matchers",
            "method_name": "has_length",
            "return_type_name": "lib.Matcher",
            "generic_return_element": "S",
            "type_parameters": ["S extends Sized"],
            "parameters": [{"type_name": "int", "name": "param1"}],
            "exceptions": ["ValueError"],
        }
