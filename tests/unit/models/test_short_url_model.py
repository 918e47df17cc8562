"""Unit tests for the ShortURLModel dataclass in short_url_model.py.

Test coverage includes:

1. Model creation
   - Ensures instances can be created with valid field types and values.

2. Optional expires_at field
   - Verifies that expires_at can be omitted and defaults to None.

3. Equality semantics
   - Confirms that models with identical data compare equal and
     that differing field values produce non-equal instances.

4. Immutability
   - Verifies that all fields are frozen after object creation.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, UTC

import pytest

from hexshortener.models.short_url_model import ShortURLModel


# -------------------------------------------------
# 1. Model creation
# -------------------------------------------------

def test_valid_short_url_model_creation():
    """Ensure ShortURLModel can be created with valid data and types."""
    expires_at = datetime(2026, 1, 1, 0, 1, 0, tzinfo=UTC)

    short_url = ShortURLModel(target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==', shortcode='dca7568', expires_at=expires_at)

    assert short_url.target == 'aHR0cHM6Ly9leGFtcGxlLmNvbQ=='
    assert short_url.shortcode == 'dca7568'
    assert short_url.expires_at == expires_at


# -------------------------------------------------
# 2. Optional fields
# -------------------------------------------------

def test_expires_at_is_optional():
    """Verify that expires_at can be omitted and defaults to None."""
    short_url = ShortURLModel(target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==', shortcode='dca7568')

    assert short_url.expires_at is None


# -------------------------------------------------
# 3. Equality semantics
# -------------------------------------------------

def test_short_url_model_equality():
    """Models with identical data should compare equal."""
    assert ShortURLModel(target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==', shortcode='dca7568') == ShortURLModel(
        target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==',
        shortcode='dca7568',
    )


@pytest.mark.parametrize(
    'right_url_parameters',
    [
        {'target': 'aHR0cHM6Ly9leGFtcGxlLm9yZw==', 'shortcode': 'dca7568'},
        {'target': 'aHR0cHM6Ly9leGFtcGxlLmNvbQ==', 'shortcode': '1eab191'},
        {'target': 'aHR0cHM6Ly9leGFtcGxlLmNvbQ==', 'shortcode': 'dca7568', 'expires_at': datetime(2027, 1, 1, tzinfo=UTC)},
    ],
)
def test_short_url_model_inequality(right_url_parameters):
    """Models with differing data should not compare equal."""
    left_url = ShortURLModel(target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==', shortcode='dca7568')

    assert left_url != ShortURLModel(**right_url_parameters)


# -------------------------------------------------
# 4. Immutability
# -------------------------------------------------

@pytest.mark.parametrize(
    'field, new_value',
    [
        ('target', 'aHR0cHM6Ly9leGFtcGxlLm9yZw=='),
        ('shortcode', '1eab191'),
        ('expires_at', datetime(2027, 1, 1, tzinfo=UTC)),
    ],
)
def test_short_url_model_immutability(field, new_value):
    """Attempting to modify fields should raise FrozenInstanceError."""
    short_url = ShortURLModel(target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==', shortcode='dca7568')

    with pytest.raises(FrozenInstanceError):
        setattr(short_url, field, new_value)
