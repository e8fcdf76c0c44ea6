import base64

import pytest

from utils import decode_data_uri, split_data_uri, to_data_uri


def test_split_data_uri():
    """
    Tests the split_data_uri function.
    """
    assert split_data_uri("data:image/png;base64,AAAA") == ("image/png", "AAAA")
    assert split_data_uri("  data:image/jpeg;base64,QUJD  ") == ("image/jpeg", "QUJD")

    # Bare base64 has no MIME type
    assert split_data_uri("QUJD") == (None, "QUJD")

    # Empty and missing values
    assert split_data_uri("") == (None, "")
    assert split_data_uri(None) == (None, "")

    with pytest.raises(ValueError):
        split_data_uri("data:image/png;base64")


def test_to_data_uri():
    assert to_data_uri(b"ABC") == "data:image/jpeg;base64,QUJD"
    assert to_data_uri(b"ABC", "image/png") == "data:image/png;base64,QUJD"


def test_decode_data_uri():
    raw = bytes(range(256))
    encoded = base64.b64encode(raw).decode("ascii")

    assert decode_data_uri(f"data:image/jpeg;base64,{encoded}") == raw
    assert decode_data_uri(encoded) == raw

    with pytest.raises(ValueError, match="empty"):
        decode_data_uri("data:image/jpeg;base64,")

    with pytest.raises(ValueError, match="not valid base64"):
        decode_data_uri("data:image/jpeg;base64,@@not-base64@@")
