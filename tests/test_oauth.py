import re

from trademe.api.oauth import (
    TokenPair,
    access_fields,
    build_authorization_header,
    final_token_fields,
    generate_nonce,
    temporary_token_fields,
)


def test_temporary_token_header():
    fields = temporary_token_fields("CK", "CS", timestamp=1700000000, nonce="abcde12345")

    assert build_authorization_header(fields) == (
        "Authorization",
        'OAuth oauth_consumer_key="CK", oauth_signature_method="PLAINTEXT", '
        'oauth_timestamp="1700000000", oauth_nonce="abcde12345", '
        'oauth_version="1.0", oauth_signature="CS%26"',
    )


def test_final_token_header():
    fields = final_token_fields(
        "CK", "CS", "TT", "TS", timestamp=1700000000, nonce="abcde12345"
    )

    assert build_authorization_header(fields) == (
        "Authorization",
        'OAuth oauth_consumer_key="CK", oauth_token="TT", '
        'oauth_signature_method="PLAINTEXT", oauth_timestamp="1700000000", '
        'oauth_nonce="abcde12345", oauth_token_secret="TS", '
        'oauth_version="1.0", oauth_signature="CS%26TS"',
    )


def test_access_header_signs_with_token_secret_without_sending_it():
    fields = access_fields("CK", "CS", "AT", "AS", timestamp=1, nonce="n")
    _, value = build_authorization_header(fields)

    assert 'oauth_token="AT"' in value
    assert 'oauth_signature="CS%26AS"' in value
    assert "oauth_token_secret" not in value


def test_header_values_are_percent_encoded():
    _, value = build_authorization_header({"oauth_token": "a b/c+d=~"})
    assert value == 'OAuth oauth_token="a%20b%2Fc%2Bd%3D~"'


def test_header_keeps_insertion_order():
    _, value = build_authorization_header({"z": "1", "a": "2", "m": "3"})
    assert value == 'OAuth z="1", a="2", m="3"'


def test_default_timestamp_and_nonce_are_filled_in():
    fields = temporary_token_fields("CK", "CS")

    assert fields["oauth_timestamp"].isdigit()
    assert len(fields["oauth_nonce"]) == 10


def test_nonce_is_ten_characters():
    assert re.fullmatch(r"[0-9a-f]{10}", generate_nonce())


def test_consecutive_nonces_differ():
    assert generate_nonce() != generate_nonce()


def test_token_pair_from_response():
    pair = TokenPair.from_response(
        {"oauth_token": "T", "oauth_token_secret": "S", "oauth_callback_confirmed": "true"}
    )
    assert pair == TokenPair(token="T", token_secret="S")


def test_none_credentials_are_signed_as_empty():
    fields = final_token_fields("CK", "CS", None, None, timestamp=1, nonce="n")

    assert fields["oauth_token"] == ""
    assert fields["oauth_token_secret"] == ""
    assert fields["oauth_signature"] == "CS&"
