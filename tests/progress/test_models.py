"""Basic unit tests for progress models and time formatting."""

import pytest

from progress_eta.core.exceptions import ConfigValidationError, InvalidOutOfBoundsFormatError
from progress_eta.progress.formatting import (
    divide_seconds, format_friendly_days, format_hms, round_half_up
)
from progress_eta.progress.models import OutOfBoundsFormat, ProgressOptions, ProgressSample


class TestOutOfBoundsFormat:
    """Test OutOfBoundsFormat parsing."""

    @pytest.mark.parametrize('token, expected', [
        (None, OutOfBoundsFormat.RAW),
        ('raw', OutOfBoundsFormat.RAW),
        ('unknown', OutOfBoundsFormat.UNKNOWN),
        ('FRIENDLY', OutOfBoundsFormat.FRIENDLY),
        (OutOfBoundsFormat.FRIENDLY, OutOfBoundsFormat.FRIENDLY),
    ])
    def test_parse_valid_tokens(self, token, expected):
        assert OutOfBoundsFormat.parse(token) is expected

    @pytest.mark.parametrize('token', ['foo', '', 1, True])
    def test_parse_invalid_tokens(self, token):
        with pytest.raises(InvalidOutOfBoundsFormatError) as exc_info:
            OutOfBoundsFormat.parse(token)
        assert exc_info.value.error_code == 'INVALID_OUT_OF_BOUNDS_FORMAT'


class TestProgressSample:
    """Test ProgressSample model."""

    def test_zero_amount_has_no_rate(self):
        assert ProgressSample(elapsed=3.0, amount=0).seconds_per_unit is None

    def test_to_dict(self):
        assert ProgressSample(elapsed=1.5, amount=3).to_dict() == {'elapsed': 1.5, 'amount': 3}


class TestProgressOptions:
    """Test ProgressOptions validation."""

    def test_defaults(self):
        options = ProgressOptions()

        assert options.total == 100
        assert options.smoothing == 0.1
        assert options.starting_at == 0
        assert options.out_of_bounds_format is OutOfBoundsFormat.RAW

    def test_from_dict_normalises_format(self):
        options = ProgressOptions.from_dict({'total': None, 'out_of_bounds_format': 'unknown'})

        assert options.total is None
        assert options.out_of_bounds_format is OutOfBoundsFormat.UNKNOWN
        assert options.to_dict() == {
            'total': None,
            'smoothing': 0.1,
            'starting_at': 0,
            'out_of_bounds_format': 'unknown',
        }

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            ProgressOptions.from_dict({'total': 10, 'title': 'Downloading', 'format': '%b'})

        assert exc_info.value.validation_errors == [
            'Unknown progress option: format',
            'Unknown progress option: title',
        ]

    def test_collects_every_error(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            ProgressOptions(smoothing=2, starting_at='zero', out_of_bounds_format='foo')

        errors = exc_info.value.validation_errors
        assert len(errors) == 3
        assert "smoothing must be a number between 0 and 1" in errors
        assert "starting_at must be a number" in errors

    def test_boolean_is_not_a_number(self):
        with pytest.raises(ConfigValidationError):
            ProgressOptions(total=True)


class TestFormatting:
    """Test time formatting helpers."""

    def test_divide_seconds(self):
        assert divide_seconds(13332) == (3, 42, 12)
        assert divide_seconds(0) == (0, 0, 0)

    @pytest.mark.parametrize('seconds, expected', [
        (0, '00:00:00'),
        (5, '00:00:05'),
        (31108, '08:38:28'),
        (359999, '99:59:59'),
        (360000, '100:00:00'),
        (380000, '105:33:20'),
    ])
    def test_format_hms(self, seconds, expected):
        assert format_hms(seconds) == expected

    def test_format_friendly_days(self):
        assert format_friendly_days(380000) == '> 4 Days'
        assert format_friendly_days(86399) == '> 0 Days'

    @pytest.mark.parametrize('value, expected', [
        (4.5, 5), (2.5, 3), (0.5, 1), (0.49, 0), (3.6, 4), (-2.5, -3)
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected
