import re

from vardump.arithmetic import export_int
from vardump.mapping import export_map, export_multimap
from vardump.options import EsStyle, Options
from vardump.skip import STOP
from vardump.strings import export_string


def plain(**kwargs):
    return Options(es_style=EsStyle.NO_ES, **kwargs)


def strip(s):
    return re.sub(r"\x1b\[[0-9;]*m", "", s)


def int_exporter(options):
    def export(value, indent, last_line_length, depth, fail_on_newline):
        return export_int(value, options)

    return export


def str_exporter(options):
    def export(value, indent, last_line_length, depth, fail_on_newline):
        return export_string(value, options, fail_on_newline)

    return export


def run_map(mapping, options, **kwargs):
    args = dict(
        indent="",
        last_line_length=0,
        current_depth=0,
        fail_on_newline=False,
    )
    args.update(kwargs)
    return export_map(
        mapping,
        args.pop("indent"),
        args.pop("last_line_length"),
        args.pop("current_depth"),
        args.pop("fail_on_newline"),
        options,
        int_exporter(options),
        int_exporter(options),
        **args,
    )


def test_empty_map():
    assert run_map({}, plain()) == "{ }"


def test_depth_limit_elides():
    options = plain(max_depth=2)
    assert run_map({1: 2}, options, current_depth=2) == "{ ... }"


def test_single_line():
    assert run_map({1: 2, 3: 4}, plain()) == "{ 1: 2, 3: 4 }"


def test_narrow_width_splits_lines():
    out = run_map({1: 2, 3: 4}, plain(max_line_width=5))
    assert [line.strip() for line in out.split("\n")] == ["{", "1: 2,", "3: 4", "}"]
    assert out.endswith("\n}")


def test_indent_is_kept_on_split():
    out = run_map({1: 2}, plain(max_line_width=3), indent="    ")
    lines = out.split("\n")
    assert lines[1].startswith("      1")
    assert lines[-1] == "    }"


def test_fail_on_newline_when_too_wide():
    assert run_map({1: 2, 3: 4}, plain(max_line_width=5), fail_on_newline=True) == "\n"


def test_nested_fails_on_newline_immediately():
    assert run_map({1: 2}, plain(), fail_on_newline=True, nested=True) == "\n"


def test_nested_always_splits():
    out = run_map({1: 2}, plain(), nested=True)
    assert out.startswith("{ \n  1: 2")
    assert out.endswith("\n}")


def test_colour_only_adds_escape_sequences():
    mapping = {1: 2, 3: 4}
    assert strip(run_map(mapping, Options())) == run_map(mapping, plain())


def test_stop_shows_ellipsis():
    def stop_after_first(index, size):
        return STOP if index >= 1 else 0

    out = run_map({1: 2, 3: 4, 5: 6}, plain(), skip_size=stop_after_first)
    assert out == "{ 1: 2, ... }"


def test_key_receives_running_line_length():
    options = plain()
    seen = []

    def key(value, indent, last_line_length, depth, fail_on_newline):
        seen.append((last_line_length, depth, fail_on_newline))
        return export_int(value, options)

    out = export_map({7: 8}, "", 10, 1, False, options, key, int_exporter(options))
    assert out == "{ 7: 8 }"
    assert seen == [(12, 2, True)]


def test_multiline_string_value_forces_split():
    options = plain()
    out = export_map(
        {1: "a\nb"}, "", 0, 0, False, options, int_exporter(options), str_exporter(options)
    )
    assert out.startswith("{ \n  1: ")
    assert "`a\nb`" in out


def test_multimap_groups_values():
    options = plain()
    received = []

    def values(value, indent, last_line_length, depth, fail_on_newline):
        received.append(value)
        return str(value)

    out = export_multimap(
        [(1, "a"), (2, "b"), (1, "c")], "", 0, 0, False, options, int_exporter(options), values
    )
    assert received == [["a", "c"], ["b"]]
    assert "1 (2): " in out
    assert "2 (1): " in out
    assert out.startswith("{ \n")


def test_multimap_empty():
    options = plain()
    assert (
        export_multimap([], "", 0, 0, False, options, int_exporter(options), int_exporter(options))
        == "{ }"
    )


def test_multimap_fails_on_newline():
    options = plain()
    out = export_multimap(
        [(1, 2)], "", 0, 0, True, options, int_exporter(options), int_exporter(options)
    )
    assert out == "\n"