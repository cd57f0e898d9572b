"""Tests for field descriptions."""

import dataclasses

from hypothesis import given, strategies as st

from fieldlist.description import DeclaredField, FieldDescription, LoadedFieldDescription

from sample_types import Component


class TestLoadedFieldDescription:
    def test_reads_handle(self):
        handle = dataclasses.fields(Component)[1]
        description = LoadedFieldDescription(handle)

        assert description.name == "quantity"
        assert description.declared_type is int
        assert description.has_default

    def test_equal_when_wrapping_same_handle(self):
        first, second = dataclasses.fields(Component)[:2]

        assert LoadedFieldDescription(first) == LoadedFieldDescription(first)
        assert LoadedFieldDescription(first) != LoadedFieldDescription(second)
        assert hash(LoadedFieldDescription(first)) == hash(LoadedFieldDescription(first))


class TestDeclaredField:
    def test_defaults(self):
        description = DeclaredField("x")

        assert description.name == "x"
        assert description.declared_type is None

    @given(name=st.text(), other=st.text())
    def test_equality_follows_values(self, name, other):
        """For any two names, declared fields are equal exactly when the names are."""
        assert (DeclaredField(name) == DeclaredField(other)) == (name == other)


class TestFieldDescriptionProtocol:
    def test_both_descriptions_satisfy_protocol(self):
        handle = dataclasses.fields(Component)[0]

        assert isinstance(DeclaredField("x"), FieldDescription)
        assert isinstance(LoadedFieldDescription(handle), FieldDescription)

    def test_objects_without_name_do_not(self):
        assert not isinstance(object(), FieldDescription)
