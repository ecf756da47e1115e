"""Tests for request validation and detection params."""

from datetime import date

import pytest
from models.detection_params import DetectionParams
from utils.validation import (
    is_valid_date, is_valid_forest, is_valid_url, validate_compare_request
)

TODAY = date(2024, 6, 1)


@pytest.mark.parametrize("value, expected", [
    ("2020-01-15", True),
    ("2015-06-23", True),
    ("2015-06-22", False),
    ("2024-06-02", False),
    ("2020-02-30", False),
    ("2020-1-5", False),
    ("", False),
    (None, False),
])
def test_is_valid_date(value, expected):
    """Dates must be well-formed and within the Sentinel-2 era."""
    assert is_valid_date(value, today=TODAY) is expected


def test_is_valid_forest():
    """Only known forests are accepted."""
    assert is_valid_forest("Karura Forest")
    assert not is_valid_forest("Sherwood Forest")
    assert not is_valid_forest(None)


def test_is_valid_url():
    """Only http(s) URLs with a host are accepted."""
    assert is_valid_url("https://example.com/a.png")
    assert is_valid_url("http://example.com")
    assert not is_valid_url("ftp://example.com/a.png")
    assert not is_valid_url("not a url")
    assert not is_valid_url("")


def test_compare_request_urls():
    """A valid URL pair passes."""
    assert validate_compare_request(
        before_url="https://a.example/1.png", after_url="https://a.example/2.png"
    ) == []


def test_compare_request_forest_dates():
    """A valid forest with ordered dates passes."""
    assert validate_compare_request(
        forest="Kakamega Forest", before_date="2019-01-01", after_date="2023-01-01", today=TODAY
    ) == []


def test_compare_request_missing_everything():
    """Neither form provided is an error."""
    errors = validate_compare_request()
    assert len(errors) == 1


def test_compare_request_dates_out_of_order():
    """after_date must be later than before_date."""
    errors = validate_compare_request(
        forest="Kakamega Forest", before_date="2023-01-01", after_date="2019-01-01", today=TODAY
    )
    assert errors == ["'after_date' must be after 'before_date'"]


def test_compare_request_collects_all_errors():
    """Every invalid field is reported."""
    errors = validate_compare_request(
        forest="Nowhere", before_date="2001-01-01", after_date="bad", today=TODAY
    )
    assert len(errors) == 3


def test_params_defaults():
    """Defaults match the calibrated policy."""
    params = DetectionParams()
    assert (params.canonical_width, params.canonical_height) == (512, 512)
    assert params.fit == 'cover'
    assert params.loss_threshold == -0.2


def test_params_with_threshold():
    """with_threshold copies, leaving the original untouched."""
    params = DetectionParams()
    changed = params.with_threshold(-0.4)
    assert changed.loss_threshold == -0.4
    assert params.loss_threshold == -0.2


@pytest.mark.parametrize("kwargs", [
    {"canonical_width": 0},
    {"canonical_height": -1},
    {"loss_threshold": -3.0},
    {"epsilon": 0.0},
    {"interpolation": "lanczos"},
    {"fit": "contain"},
    {"max_workers": 0},
])
def test_params_validation(kwargs):
    """Out-of-range params raise ValueError."""
    with pytest.raises(ValueError):
        DetectionParams(**kwargs)
