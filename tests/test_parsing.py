from rsnimons.parsing import parse_config_fields, parse_fields, to_lower


def test_parse_fields_int_and_string():
    assert parse_fields("1;Paracetamol\n", "is") == [1, "Paracetamol"]


def test_parse_fields_accepts_commas_and_drops_carriage_returns():
    assert parse_fields("12,Budi\r\n", "is") == [12, "Budi"]


def test_parse_fields_missing_fields_read_as_empty():
    assert parse_fields("7;\n", "isfc") == [7, "", 0.0, ""]


def test_parse_fields_char_takes_first_character():
    assert parse_fields("xyz;5", "ci") == ["x", 5]


def test_parse_fields_float_is_single_precision():
    value = parse_fields("36.6;", "f")[0]
    assert f"{value:f}" == "36.599998"


def test_parse_fields_exact_float():
    assert parse_fields("2.5", "f") == [2.5]


def test_parse_fields_int_uses_leading_digits():
    assert parse_fields("42abc;-3;junk", "iii") == [42, -3, 0]


def test_parse_fields_unknown_letter_skips_field():
    assert parse_fields("1;skip;3", "ixi") == [1, 3]


def test_parse_fields_stops_at_newline():
    assert parse_fields("1;a\n2;b", "isis") == [1, "a", 0, ""]


def test_parse_fields_keeps_spaces_inside_fields():
    assert parse_fields("3;Obat Batuk\n", "is") == [3, "Obat Batuk"]


def test_parse_config_fields_splits_on_spaces():
    assert parse_config_fields("5 6\n", "ii") == [5, 6]


def test_parse_config_fields_first_of_many():
    assert parse_config_fields("4 10 11 12\n", "i") == [4]


def test_parse_config_fields_empty_line():
    assert parse_config_fields("\n", "i") == [0]


def test_to_lower_ascii_only():
    assert to_lower("HeLLo World") == "hello world"
    assert to_lower("ÄB") == "Äb"


def test_to_lower_is_idempotent():
    text = to_lower("MiXeD 123 CaSe")
    assert to_lower(text) == text