import pytest

from datacomptroller.arguments import (
    FIELDS,
    ArgumentError,
    build_parser,
    check_file_exists,
    parse_arguments,
    parse_config,
    read_config,
)


def test_check_file_exists(tmp_path):
    existing = tmp_path / "a.conf"
    existing.write_text("log\n")
    assert check_file_exists(str(existing)) is True
    assert check_file_exists(str(tmp_path / "missing.conf")) is False


def test_parse_config_single_block():
    lines = ["log", "tag:web", "port:9000", "output:out.log", "rotation:yes"]
    records = parse_config(lines)
    assert len(records) == 1
    record = records[0]
    assert set(record) == set(FIELDS)
    assert record["tag"] == "web"
    assert record["port"] == "9000"
    assert record["output"] == "out.log"
    assert record["rotation"] == "yes"
    assert record["filter"] == ""
    assert record["instant"] == ""


def test_parse_config_skips_comments_and_blank_lines():
    lines = ["# heading\n", "\n", "log\n", "#tag:hidden\n", "tag:shown\n"]
    records = parse_config(lines)
    assert len(records) == 1
    assert records[0]["tag"] == "shown"


def test_parse_config_multiple_blocks_in_order():
    lines = ["log", "tag:first", "log", "tag:second", "log", "tag:third"]
    tags = [record["tag"] for record in parse_config(lines)]
    assert tags == ["first", "second", "third"]


def test_parse_config_filter_and_nofilter_are_distinct():
    lines = ["log", "filter:keep", "nofilter:drop"]
    record = parse_config(lines)[0]
    assert record["filter"] == "keep"
    assert record["nofilter"] == "drop"


def test_parse_config_fields_before_log_form_own_record():
    records = parse_config(["tag:orphan", "log", "tag:real"])
    assert len(records) == 2
    assert records[0] == {"tag": "orphan"}
    assert records[1]["tag"] == "real"


def test_parse_config_value_keeps_colons_and_spaces():
    record = parse_config(["log", "output:a.log host,9000"])[0]
    assert record["output"] == "a.log host,9000"


def test_parse_config_empty_input():
    assert parse_config([]) == []


def test_parse_config_carriage_return_lines_do_not_match():
    records = parse_config(["log", "tag:x\r"])
    assert records[0]["tag"] == ""


def test_read_config_from_file(tmp_path):
    path = tmp_path / "c.conf"
    path.write_text("log\ntag:t1\nport:1234\noutput:o.log\n")
    records = read_config(str(path))
    assert records == parse_config(["log", "tag:t1", "port:1234", "output:o.log"])


def test_read_config_missing_file(tmp_path):
    with pytest.raises(ArgumentError):
        read_config(str(tmp_path / "nope.conf"))


def test_build_parser_options():
    options = build_parser().parse_args(["--server", "--file", "x.conf"])
    assert options.server is True
    assert options.file == "x.conf"
    assert options.killall is False


def test_parse_arguments_reads_file(tmp_path, capsys):
    path = tmp_path / "c.conf"
    path.write_text("log\ntag:svc\nport:7000\noutput:o.log\n")
    records = parse_arguments(["--server", "--file", str(path)])
    assert records[0]["tag"] == "svc"
    out = capsys.readouterr().out
    assert f"going to invoke serve along with file {path}" in out


def test_parse_arguments_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.conf"
    with pytest.raises(ArgumentError):
        parse_arguments(["--server", "--file", str(missing)])
    assert f"File {missing} not found." in capsys.readouterr().out


def test_parse_arguments_unknown_option(capsys):
    with pytest.raises(ArgumentError):
        parse_arguments(["--bogus"])
    assert "error:" in capsys.readouterr().err


def test_parse_arguments_without_file():
    with pytest.raises(ArgumentError):
        parse_arguments(["--status"])