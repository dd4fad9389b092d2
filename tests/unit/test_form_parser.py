import pytest

from ajax_api.exceptions import FormDataMissing, FormMethodNotAllowed
from ajax_api.helpers.form_parser import decode_form, encode_form, parse_form


def test_decode_form_nests_bracketed_keys():
    form = decode_form("data%5BContact%5D%5Bname%5D=Ann+Lee&data%5BContact%5D%5Bemail%5D=ann%40example.com")
    assert form == {"data": {"Contact": {"name": "Ann Lee", "email": "ann@example.com"}}}


def test_decode_form_collects_empty_brackets_into_a_list():
    form = decode_form("data[Tag][]=a&data[Tag][]=b&data[Tag][]=c")
    assert form == {"data": {"Tag": ["a", "b", "c"]}}


def test_decode_form_keeps_blank_values_and_last_scalar_wins():
    form = decode_form("a=&b=1&b=2&flag")
    assert form == {"a": "", "b": "2", "flag": ""}


def test_decode_form_list_of_records():
    form = decode_form("rows[][id]=1&rows[][id]=2")
    assert form == {"rows": [{"id": "1"}, {"id": "2"}]}


def test_decode_form_named_key_on_list_becomes_mapping():
    form = decode_form("a[]=x&a[key]=y")
    assert form == {"a": {"0": "x", "key": "y"}}


def test_decode_form_unclosed_bracket_is_literal():
    assert decode_form("a[b=1") == {"a[b": "1"}


def test_decode_form_empty_input():
    assert decode_form("") == {}
    assert decode_form(None) == {}


def test_encode_then_decode_reproduces_mapping_without_token():
    original = {
        "_method": "POST",
        "data": {
            "_Token": {"key": "abc123", "fields": "x"},
            "ContactLog": {"subject": "Hello & welcome", "body": "100% sure"},
            "Contact": {"name": "Ann", "tags": ["a", "b"]},
        },
    }

    data = parse_form(encode_form(original))

    assert data == {
        "ContactLog": {"subject": "Hello & welcome", "body": "100% sure"},
        "Contact": {"name": "Ann", "tags": ["a", "b"]},
    }


def test_parse_form_with_matching_method():
    assert parse_form("_method=PUT&data[x]=1", "PUT") == {"x": "1"}


def test_parse_form_with_other_method_raises():
    with pytest.raises(FormMethodNotAllowed) as exc_info:
        parse_form("_method=PUT&data[x]=1", "POST")

    assert exc_info.value.method == "PUT"
    assert exc_info.value.code == 405
    assert "PUT" in exc_info.value.description


def test_parse_form_method_check_is_case_sensitive():
    with pytest.raises(FormMethodNotAllowed):
        parse_form("_method=put&data[x]=1", "PUT")


def test_parse_form_missing_method_field_raises():
    with pytest.raises(FormMethodNotAllowed) as exc_info:
        parse_form("data[x]=1", "POST")
    assert exc_info.value.method is None


def test_parse_form_without_method_ignores_method_field():
    assert parse_form("_method=DELETE&data[x]=1") == {"x": "1"}


def test_parse_form_without_data_raises():
    with pytest.raises(FormDataMissing) as exc_info:
        parse_form("_method=POST&other=1", "POST")
    assert exc_info.value.code == 400


def test_parse_form_with_scalar_data_raises():
    with pytest.raises(FormDataMissing):
        parse_form("data=plain")


def test_parse_form_custom_token_field():
    assert parse_form("data[csrf]=t&data[x]=1", token_field="csrf") == {"x": "1"}


def test_decode_form_sequential_indexes_build_a_list():
    assert decode_form("a[0]=x&a[1]=y") == {"a": ["x", "y"]}
    assert decode_form("a[0]=x&a[2]=z") == {"a": {"0": "x", "2": "z"}}
    assert decode_form("a[1]=y") == {"a": {"1": "y"}}


def test_encode_then_decode_list_of_records():
    original = {"data": {"Phone": [{"number": "1"}, {"number": "2", "kind": "work"}]}}
    assert parse_form(encode_form(original)) == original["data"]


def test_decode_form_non_ascii_digits_are_plain_keys():
    assert decode_form("data[a][]=x&data[a][%C2%B2]=y") == {"data": {"a": {"0": "x", "²": "y"}}}
    assert decode_form("data[a][%C2%B2]=x&data[a][]=y") == {"data": {"a": {"²": "x", "0": "y"}}}


def test_parse_form_indexed_data_is_returned_by_position():
    assert parse_form(encode_form({"data": {"0": {"x": "1"}}})) == {"0": {"x": "1"}}
    assert parse_form("data[]=a&data[]=b") == {"0": "a", "1": "b"}


def test_encode_form_rejects_bracketed_keys():
    with pytest.raises(ValueError):
        encode_form({"data": {"a[b]": "1"}})
