"""
Tests for OTP utilities
"""
import pytest
from fiftyhertz.utils.datetime_utils import utcnow
from fiftyhertz.utils.otp import generate_otp, get_otp_expiry


def test_generate_otp():
    """Test OTP generation"""
    otp = generate_otp()
    assert len(otp) == 4
    assert otp.isdigit()


def test_generate_otp_range():
    """Codes never start with zero and stay within four digits"""
    for _ in range(500):
        assert 1000 <= int(generate_otp()) <= 9999


def test_get_otp_expiry():
    """Test OTP expiry calculation"""
    expiry = get_otp_expiry()
    assert expiry > utcnow()
    # Should be about 15 minutes (900 seconds) in future
    diff = (expiry - utcnow()).total_seconds()
    assert 890 < diff < 910
