from pathlib import Path
from textwrap import dedent

import pytest

from tinystitch.io import TinyV2Reader, TinyV2Writer
from tinystitch.io.tiny_v2 import escape, unescape
from tinystitch.spec import (
    DuplicateNamespaceError,
    MappingFormatError,
    TinyClass,
    TinyFile,
    TinyHeader,
)

SAMPLE = (
    "tiny\t2\t0\tintermediary\tnamed\n"
    "\tsorted\n"
    "\tauthor\tsomeone\n"
    "c\tnet/minecraft/class_1\tcom/foo/Bar\n"
    "\tc\tA class\\twith a tab\n"
    "\tf\tI\tfield_1\tcount\n"
    "\t\tc\tfield comment\n"
    "\tm\t(I)V\tmethod_1\tsetCount\n"
    "\t\tc\tmethod comment\n"
    "\t\tp\t1\t\tvalue\n"
    "\t\t\tc\tthe new count\n"
    "\t\tv\t2\t5\t0\t\tlocal\n"
    "c\tnet/minecraft/class_2\t\n"
)


def test_reader_builds_full_tree():
    tiny_file = TinyV2Reader().parse(SAMPLE)

    header = tiny_file.header
    assert header.namespaces == ["intermediary", "named"]
    assert (header.major_version, header.minor_version) == (2, 0)
    assert header.properties == {"sorted": None, "author": "someone"}

    assert len(tiny_file.classes) == 2
    bar = tiny_file.classes[0]
    assert bar.names == ["net/minecraft/class_1", "com/foo/Bar"]
    assert bar.comments == ["A class\twith a tab"]

    (field,) = bar.fields
    assert field.descriptor == "I"
    assert field.names == ["field_1", "count"]
    assert field.comments == ["field comment"]

    (method,) = bar.methods
    assert method.descriptor == "(I)V"
    assert method.comments == ["method comment"]
    (param,) = method.parameters
    assert (param.lv_index, param.names, param.comments) == (
        1,
        ["", "value"],
        ["the new count"],
    )
    (local,) = method.local_variables
    assert (local.lv_index, local.lv_start_offset, local.lv_table_index) == (2, 5, 0)
    assert local.names == ["", "local"]

    assert tiny_file.classes[1].names == ["net/minecraft/class_2", ""]


def test_writer_output_reads_back_identically(tmp_path: Path):
    original = TinyV2Reader().parse(SAMPLE)
    target = tmp_path / "out" / "mappings.tiny"

    TinyV2Writer().write(original, target)

    assert TinyV2Reader().read(target) == original


def test_writer_pads_short_rows():
    tiny_file = TinyFile(
        TinyHeader(["intermediary", "named", "official"]),
        [TinyClass(names=["class_1"])],
    )

    lines = TinyV2Writer().dumps(tiny_file).splitlines()

    assert lines == ["tiny\t2\t0\tintermediary\tnamed\tofficial", "c\tclass_1\t\t"]


def test_escaped_names_property_controls_name_escaping():
    content = dedent(
        """\
        tiny\t2\t0\ta\tb
        \tescaped-names
        c\tweird\\tname\tplain
        """
    )

    tiny_file = TinyV2Reader().parse(content)
    assert tiny_file.classes[0].names == ["weird\tname", "plain"]
    assert "c\tweird\\tname\tplain" in TinyV2Writer().dumps(tiny_file)


def test_unknown_sections_are_skipped():
    content = "tiny\t2\t0\ta\tb\nc\tx\ty\n\tq\tsomething\nz\tother\n"
    tiny_file = TinyV2Reader().parse(content)
    assert [c.names for c in tiny_file.classes] == [["x", "y"]]


@pytest.mark.parametrize(
    "content",
    [
        "",
        "v1\ta\tb\n",
        "tiny\t3\t0\ta\tb\n",
        "tiny\tx\t0\ta\tb\n",
        "tiny\t2\t0\n",
        "tiny\t2\t0\ta\tb\nc\tx\ty\n\tm\t()V\tm\tn\n\t\tp\tnot-a-number\tq\n",
    ],
)
def test_invalid_content_is_rejected(content):
    with pytest.raises(MappingFormatError):
        TinyV2Reader().parse(content)


def test_duplicate_namespaces_are_rejected():
    with pytest.raises(DuplicateNamespaceError):
        TinyV2Reader().parse("tiny\t2\t0\ta\ta\n")


def test_escape_helpers():
    raw = "back\\slash\nnew\ttab\0nul\rcr"
    assert unescape(escape(raw)) == raw
    assert escape("plain") == "plain"
    with pytest.raises(MappingFormatError):
        unescape("dangling\\")


def test_unicode_separators_in_comments_survive_round_trip():
    original = TinyFile(
        header=TinyHeader(namespaces=["intermediary", "named"]),
        classes=[
            TinyClass(
                names=["net/minecraft/class_1", "com/foo/Bar"],
                comments=["first\u2028second", "page\x0cbreak\x85next"],
            )
        ],
    )

    content = TinyV2Writer().dumps(original)

    assert TinyV2Reader().parse(content) == original
    assert TinyV2Reader().parse(content.replace("\n", "\r\n")) == original
