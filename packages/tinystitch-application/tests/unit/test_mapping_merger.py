import logging

import pytest

from tinystitch.app import MappingMerger, MergeOptions
from tinystitch.app.services import build_merge_context
from tinystitch.spec import (
    DuplicateNamespaceError,
    MissingDescriptorError,
    TinyClass,
    TinyField,
    TinyHeader,
    TinyLocalVariable,
    TinyMethod,
    TinyMethodParameter,
)
from tinystitch.test_utils import tiny_file

A_NAMESPACES = ["intermediary", "named"]
B_NAMESPACES = ["official", "intermediary"]


@pytest.fixture
def merger():
    return MappingMerger()


def test_three_namespace_merge(merger):
    file_a = tiny_file(
        A_NAMESPACES,
        TinyClass(
            names=["net/minecraft/class_1", "com/foo/Bar"],
            fields=[TinyField(descriptor="I", names=["field_1", "count"])],
            methods=[TinyMethod(descriptor="()V", names=["method_1", "tick"])],
        ),
    )
    file_b = tiny_file(
        B_NAMESPACES,
        TinyClass(
            names=["a", "net/minecraft/class_1"],
            fields=[TinyField(descriptor="I", names=["b", "field_1"])],
            methods=[TinyMethod(descriptor="()V", names=["c", "method_1"])],
        ),
    )

    merged = merger.merge(file_a, file_b)

    assert merged.namespaces == ["intermediary", "named", "official"]
    (cls,) = merged.classes
    assert cls.names == ["net/minecraft/class_1", "com/foo/Bar", "a"]
    assert cls.fields == [
        TinyField(descriptor="I", names=["field_1", "count", "b"])
    ]
    assert cls.methods == [
        TinyMethod(descriptor="()V", names=["method_1", "tick", "c"])
    ]


def test_unmatched_entries_are_filled_with_key(merger):
    file_a = tiny_file(A_NAMESPACES, TinyClass(names=["class_2", "com/foo/Only"]))
    file_b = tiny_file(B_NAMESPACES, TinyClass(names=["z", "class_3"]))

    merged = merger.merge(file_a, file_b)

    assert [c.names for c in merged.classes] == [
        ["class_2", "com/foo/Only", "class_2"],
        ["class_3", "class_3", "z"],
    ]


def test_unmatched_entries_leave_holes_when_requested(merger):
    file_a = tiny_file(A_NAMESPACES, TinyClass(names=["class_2", "com/foo/Only"]))
    file_b = tiny_file(B_NAMESPACES, TinyClass(names=["z", "class_3"]))

    merged = merger.merge(file_a, file_b, MergeOptions(leave_holes=True))

    assert [c.names for c in merged.classes] == [
        ["class_2", "com/foo/Only", ""],
        ["class_3", "", "z"],
    ]


def test_descriptor_is_taken_from_whichever_side_has_one(merger):
    file_a = tiny_file(A_NAMESPACES, TinyClass(names=["class_1", "Foo"]))
    file_b = tiny_file(
        B_NAMESPACES,
        TinyClass(
            names=["a", "class_1"],
            fields=[TinyField(descriptor="J", names=["b", "field_9"])],
        ),
    )

    merged = merger.merge(file_a, file_b)

    assert merged.classes[0].fields == [
        TinyField(descriptor="J", names=["field_9", "field_9", "b"])
    ]


def test_entry_without_any_descriptor_is_rejected(merger):
    file_a = tiny_file(
        A_NAMESPACES,
        TinyClass(
            names=["class_1", "Foo"],
            methods=[TinyMethod(descriptor=None, names=["method_1", "run"])],
        ),
    )
    file_b = tiny_file(B_NAMESPACES, TinyClass(names=["a", "class_1"]))

    with pytest.raises(MissingDescriptorError) as exc_info:
        merger.merge(file_a, file_b)
    assert exc_info.value.key == "method_1"


def test_comments_are_unioned(merger):
    file_a = tiny_file(
        A_NAMESPACES, TinyClass(names=["class_1", "Foo"], comments=["x", "y"])
    )
    file_b = tiny_file(
        B_NAMESPACES, TinyClass(names=["a", "class_1"], comments=["y", "z"])
    )

    merged = merger.merge(file_a, file_b)

    assert merged.classes[0].comments == ["x", "y", "z"]


def test_parameters_merge_by_lv_index_without_key_fill(merger):
    file_a = tiny_file(
        A_NAMESPACES,
        TinyClass(
            names=["class_1", "Foo"],
            methods=[
                TinyMethod(
                    descriptor="(I)V",
                    names=["method_1", "set"],
                    parameters=[TinyMethodParameter(1, ["", "value"], ["new value"])],
                )
            ],
        ),
    )
    file_b = tiny_file(
        B_NAMESPACES,
        TinyClass(
            names=["a", "class_1"],
            methods=[
                TinyMethod(
                    descriptor="(I)V",
                    names=["b", "method_1"],
                    parameters=[
                        TinyMethodParameter(1, ["p_a", ""]),
                        TinyMethodParameter(2, ["p_b", ""]),
                    ],
                )
            ],
        ),
    )

    merged = merger.merge(file_a, file_b)

    (method,) = merged.classes[0].methods
    assert method.parameters == [
        TinyMethodParameter(1, ["", "value", "p_a"], ["new value"]),
        TinyMethodParameter(2, ["", "", "p_b"]),
    ]


def test_local_variable_mismatch_keeps_a(merger, caplog):
    def with_local(names, local):
        return TinyClass(
            names=names,
            methods=[
                TinyMethod(
                    descriptor="()V",
                    names=[n.replace("class", "method") for n in names],
                    local_variables=[local],
                )
            ],
        )

    file_a = tiny_file(
        A_NAMESPACES,
        with_local(["class_1", "Foo"], TinyLocalVariable(2, 5, 0, ["", "tmp"])),
    )
    file_b = tiny_file(
        B_NAMESPACES,
        with_local(["a", "class_1"], TinyLocalVariable(2, 6, 1, ["x", ""])),
    )

    with caplog.at_level(logging.WARNING):
        merged = merger.merge(file_a, file_b)

    (local,) = merged.classes[0].methods[0].local_variables
    assert local == TinyLocalVariable(2, 5, 0, ["", "tmp", "x"])
    assert "Local variable 2 disagrees" in caplog.text


def test_nested_class_missing_from_b_borrows_enclosing_name(merger):
    file_a = tiny_file(
        A_NAMESPACES,
        TinyClass(names=["pkg/Outer", "com/Outer"]),
        TinyClass(names=["pkg/Outer$Inner", "com/Outer$Inner"]),
    )
    file_b = tiny_file(B_NAMESPACES, TinyClass(names=["a", "pkg/Outer"]))

    for options in (MergeOptions(), MergeOptions(leave_holes=True)):
        merged = merger.merge(file_a, file_b, options)
        assert merged.classes[1].names == ["pkg/Outer$Inner", "com/Outer$Inner", "a$Inner"]


def test_merging_a_file_with_itself_is_identity(merger):
    file_a = tiny_file(
        A_NAMESPACES,
        TinyClass(
            names=["class_1", "Foo"],
            comments=["doc"],
            fields=[TinyField(descriptor="I", names=["field_1", "count"])],
            methods=[
                TinyMethod(
                    descriptor="(I)V",
                    names=["method_1", "set"],
                    parameters=[TinyMethodParameter(1, ["p", "value"])],
                )
            ],
        ),
    )

    merged = merger.merge(file_a, file_a, MergeOptions(common_namespace="intermediary"))

    assert merged == file_a


def test_duplicate_namespaces_fail_before_merging(merger):
    file_a = tiny_file(
        ["intermediary", "named", "named"], TinyClass(names=["c1", "Foo", "Bar"])
    )
    file_b = tiny_file(["intermediary", "official"], TinyClass(names=["c1", "a"]))

    with pytest.raises(DuplicateNamespaceError):
        merger.merge(file_a, file_b)


def test_nested_class_missing_from_a_borrows_renamed_enclosing_class(merger):
    file_a = tiny_file(
        ["official", "named"], TinyClass(names=["pkg/Outer", "pkg/renamed/Outer"])
    )
    file_b = tiny_file(
        ["official", "intermediary"],
        TinyClass(names=["pkg/Outer", "pkg/Outer"]),
        TinyClass(names=["pkg/Outer$Inner", "pkg/Outer$Inner"]),
    )

    merged = merger.merge(file_a, file_b, MergeOptions(common_namespace="official"))

    assert merged.namespaces == ["official", "named", "intermediary"]
    assert merged.classes[1].names == [
        "pkg/Outer$Inner",
        "pkg/renamed/Outer$Inner",
        "pkg/Outer$Inner",
    ]


def test_local_variable_needs_at_least_one_side(merger):
    context = build_merge_context(
        TinyHeader(namespaces=A_NAMESPACES),
        TinyHeader(namespaces=B_NAMESPACES),
        MergeOptions(),
    )

    with pytest.raises(ValueError):
        merger.merge_local_variable(3, None, None, context)
