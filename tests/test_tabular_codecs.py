import configparser

import pytest

ROWS = [{"a": 1, "b": "x"}, {"a": 2, "c": True}]


# --- INI ---

def test_ini_writes_lists_as_indexed_keys(registry):
    assert registry.encode({"a": 1, "b": [2, 3]}, "ini") == "a = 1\nb[0] = 2\nb[1] = 3\n"


def test_ini_decode_regroups_lists_and_keeps_strings(registry):
    assert registry.decode("ini", "a = 1\nb[0] = 2\nb[1] = 3\n") == {"a": "1", "b": ["2", "3"]}


def test_ini_nested_mappings_become_dotted_sections(registry):
    value = {"name": "demo", "server": {"host": "localhost", "tls": True, "db": {"user": None}}}

    text = registry.encode(value, "ini")

    assert "[server]\nhost = localhost\ntls = true\n" in text
    assert "[server.db]\nuser = null\n" in text
    assert registry.decode("ini", text) == value


def test_ini_reads_hand_written_files(registry):
    text = """
; comment
title = Example

[owner]
name = Tom
path = C:\\%APPDATA%\\app
"""
    assert registry.decode("ini", text) == {
        "title": "Example",
        "owner": {"name": "Tom", "path": "C:\\%APPDATA%\\app"},
    }


def test_ini_keeps_key_case(registry):
    assert registry.decode("ini", "[Section]\nCamelKey = 1\n") == {"Section": {"CamelKey": "1"}}


def test_ini_rejects_non_mapping(registry):
    with pytest.raises(TypeError):
        registry.encode([1, 2], "ini")


def test_ini_parse_errors_propagate(registry):
    with pytest.raises(configparser.ParsingError):
        registry.decode("ini", "[unclosed\n")


def test_ini_empty_mapping_encodes_to_empty_text(registry):
    assert registry.encode({}, "ini") == ""
    assert registry.decode("ini", "") == {}


@pytest.mark.parametrize(
    "value",
    [
        {"a=b": "1"},
        {"a:b": "1"},
        {"[x]": "1"},
        {"; note": "1"},
        {" padded": "1"},
        {"line\nbreak": "1"},
        {"b[0]": "1"},
        {"dotted.name": {"x": "1"}},
    ],
)
def test_ini_rejects_keys_it_cannot_read_back(registry, value):
    with pytest.raises(ValueError):
        registry.encode(value, "ini")


def test_ini_writes_nested_list_items_as_json(registry):
    text = registry.encode({"a": [{"x": 1}, [1, 2]]}, "ini")

    assert text == 'a[0] = {"x": 1}\na[1] = [1, 2]\n'
    assert registry.decode("ini", text) == {"a": ['{"x": 1}', "[1, 2]"]}


# --- CSV ---

def test_csv_header_is_union_of_row_keys(registry):
    assert registry.encode(ROWS, "csv") == "a,b,c\n1,x,\n2,,true\n"


def test_csv_decode_returns_string_rows(registry):
    assert registry.decode("csv", "a,b,c\n1,x,\n2,,true\n") == [
        {"a": "1", "b": "x", "c": ""},
        {"a": "2", "b": "", "c": "true"},
    ]


def test_csv_single_mapping_is_one_row(registry):
    assert registry.encode({"id": 7, "tags": ["a", "b"]}, "csv") == 'id,tags\n7,"[""a"", ""b""]"\n'


def test_csv_skips_byte_order_mark(registry):
    assert registry.decode("csv", "\ufeffid,name\n1,Ann\n") == [{"id": "1", "name": "Ann"}]


def test_csv_rejects_scalar_rows(registry):
    with pytest.raises(TypeError):
        registry.encode([1, 2], "csv")


# --- spreadsheets ---

@pytest.mark.parametrize(
    "fmt, magic",
    [("xlsx", b"PK"), ("xls", b"\xd0\xcf\x11\xe0")],
)
def test_spreadsheet_round_trip(registry, fmt, magic):
    rows = [{"name": "apple", "qty": 3, "price": 1.25}, {"name": "pear", "qty": 5, "price": 0.5}]

    data = registry.encode(rows, fmt)

    assert isinstance(data, bytes)
    assert data.startswith(magic)
    assert registry.decode(fmt, data) == rows


@pytest.mark.parametrize("fmt", ["xlsx", "xls"])
def test_spreadsheet_empty_cells_decode_as_none(registry, fmt):
    rows = [{"a": 1, "b": None}, {"a": None, "b": "x"}]

    assert registry.decode(fmt, registry.encode(rows, fmt)) == rows


def test_spreadsheet_uses_configured_sheet_name():
    import io

    import openpyxl

    from formatkit.codecs.builtins.spreadsheet_codec import XlsxCodec

    data = XlsxCodec(sheet_name="Export").encode([{"a": 1}])

    assert openpyxl.load_workbook(io.BytesIO(data)).sheetnames == ["Export"]


def test_spreadsheet_decode_accepts_buffer_types(registry):
    data = registry.encode([{"a": 1}], "xlsx")

    assert registry.decode("xlsx", memoryview(data)) == [{"a": 1}]
    assert registry.decode("xlsx", bytearray(data)) == [{"a": 1}]


@pytest.mark.parametrize("fmt", ["xlsx", "xls"])
def test_spreadsheet_drops_rows_with_only_empty_cells(registry, fmt):
    rows = [{"a": 1, "b": "x"}, {"a": None, "b": None}]

    assert registry.decode(fmt, registry.encode(rows, fmt)) == rows[:1]
    assert registry.decode(fmt, registry.encode([{"a": None}], fmt)) == []
