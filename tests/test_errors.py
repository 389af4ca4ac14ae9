import logging

import pytest

from apns_payload import (PayloadError, PayloadTooLargeError, notification,
                          silent_notification)


def test_ensure_fits():
    p = silent_notification()
    length = p.ensure_fits(4096)
    assert length == p.byte_length()


def test_ensure_fits_exact_limit():
    p = silent_notification()
    assert p.ensure_fits(p.byte_length()) == p.byte_length()


def test_ensure_fits_too_large(caplog):
    p = notification("x" * 100, 1, "default")
    caplog.set_level(logging.DEBUG, logger="apns_payload.payload")
    with pytest.raises(PayloadTooLargeError) as excinfo:
        p.ensure_fits(64)
    assert excinfo.value.length == p.byte_length()
    assert excinfo.value.limit == 64
    assert "exceeds limit" in caplog.text


def test_error_hierarchy():
    error = PayloadTooLargeError(10, 5)
    assert isinstance(error, PayloadError)
    assert repr(error) == "PayloadTooLargeError(length=10, limit=5)"
    assert str(error) == "payload is 10 bytes, limit is 5"
