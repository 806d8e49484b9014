from tinystitch.app.services import match_enclosing_class, match_enclosing_class_if_needed
from tinystitch.spec import TinyClass


def test_nested_class_borrows_enclosing_name():
    classes = {"pkg/Outer": TinyClass(names=["pkg/Outer", "com/Renamed"])}

    assert match_enclosing_class("pkg/Outer$Inner", classes, 1) == "com/Renamed$Inner"


def test_closest_mapped_ancestor_wins():
    classes = {
        "pkg/Outer": TinyClass(names=["pkg/Outer", "com/Renamed"]),
        "pkg/Outer$Mid": TinyClass(names=["pkg/Outer$Mid", "com/Renamed$Middle"]),
    }

    assert (
        match_enclosing_class("pkg/Outer$Mid$Inner", classes, 1)
        == "com/Renamed$Middle$Inner"
    )
    # Only the outermost class is mapped: all remaining segments are kept.
    del classes["pkg/Outer$Mid"]
    assert (
        match_enclosing_class("pkg/Outer$Mid$Inner", classes, 1)
        == "com/Renamed$Mid$Inner"
    )


def test_unmapped_or_unnamed_ancestor_falls_back_to_key():
    assert match_enclosing_class("pkg/Outer$Inner", {}, 1) == "pkg/Outer$Inner"

    classes = {"pkg/Outer": TinyClass(names=["pkg/Outer", ""])}
    assert match_enclosing_class("pkg/Outer$Inner", classes, 1) == "pkg/Outer$Inner"


def test_existing_or_top_level_classes_are_left_alone():
    existing = TinyClass(names=["pkg/Outer$Inner", "com/Inner"])
    assert (
        match_enclosing_class_if_needed("pkg/Outer$Inner", existing, {}, 0, 2)
        is existing
    )
    assert match_enclosing_class_if_needed("pkg/Top", None, {}, 0, 2) is None


def test_synthesized_class_keeps_key_in_shared_column():
    classes = {"pkg/Outer": TinyClass(names=["a", "pkg/Outer"])}

    synthesized = match_enclosing_class_if_needed(
        "pkg/Outer$Inner", None, classes, 1, 2
    )

    assert synthesized == TinyClass(names=["a$Inner", "pkg/Outer$Inner"])
