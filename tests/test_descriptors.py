from __future__ import annotations

import dataclasses

import pytest

from assertcore import StandardRepresentation
from assertcore.descriptors import (
    DescriptorKind,
    ErrorDescriptor,
    is_equal,
    is_not_equal,
    is_not_instance_of,
    is_not_instance_of_any,
    is_not_same,
    is_null,
    is_same,
)


@pytest.mark.parametrize(
    ("descriptor", "kind", "message"),
    [
        (
            is_not_equal("foo", "bar"),
            DescriptorKind.NOT_EQUAL,
            'expected:<"bar"> but was:<"foo">',
        ),
        (
            is_not_equal(5, None),
            DescriptorKind.NOT_EQUAL,
            "expected:<null> but was:<5>",
        ),
        (
            is_equal(1, 1),
            DescriptorKind.EQUAL,
            "expected:<1> not to be equal to:<1>",
        ),
        (is_null(), DescriptorKind.NULL, "expected not null"),
        (
            is_not_instance_of(42, str),
            DescriptorKind.NOT_INSTANCE_OF,
            "expected instance of:<str> but was instance of:<int>",
        ),
        (
            is_not_instance_of_any("x", (int, float)),
            DescriptorKind.NOT_INSTANCE_OF_ANY,
            "expected instance of any:<[int, float]> but was instance of:<str>",
        ),
        (
            is_not_same([1], [1]),
            DescriptorKind.NOT_SAME,
            "expected same instance but found:<[1]> and:<[1]>",
        ),
        (
            is_same("a"),
            DescriptorKind.SAME,
            'expected not same instance but found:<"a">',
        ),
    ],
)
def test_templates(descriptor: ErrorDescriptor, kind: DescriptorKind, message: str):
    assert descriptor.kind is kind
    assert descriptor.render(StandardRepresentation()) == message


def test_render_uses_default_representation():
    assert is_not_equal("foo", "bar").render() == 'expected:<"bar"> but was:<"foo">'


def test_percent_signs_in_values():
    assert is_not_equal("100%", "%s").render() == 'expected:<"%s"> but was:<"100%">'


def test_descriptor_is_immutable():
    descriptor = is_null()
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.template = "changed"  # type: ignore[misc]


def test_values_rendered_only_on_render():
    rendered: list[object] = []

    class Recording:
        def to_string(self, value):
            rendered.append(value)
            return "?"

    descriptor = is_not_same("a", "b")
    assert rendered == []

    assert descriptor.render(Recording()) == "expected same instance but found:<?> and:<?>"
    assert rendered == ["a", "b"]


def test_instance_of_any_keeps_types_from_iterators():
    descriptor = is_not_instance_of_any(1, iter([str, bytes]))
    assert descriptor.render() == (
        "expected instance of any:<[str, bytes]> but was instance of:<int>"
    )
