"""
Tests for ProductDimensions Value Object.
Covers: decimal coercion, validation of required/optional fields,
volume and cubic weight, immutability.
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from src.domain.pricing.value_objects.product_dimensions import ProductDimensions
from src.domain.shared.exceptions import InvalidProductDimensionsError


def _dims(**overrides):
    values = {
        "height": 50,
        "width": 50,
        "length": 50,
        "nominal_weight": 1,
        "package_weight": 1,
        "minimum_quantity": 1,
        "package_kind": "Saco",
    }
    values.update(overrides)
    return ProductDimensions(**values)


# ============================================================================
# HAPPY PATH TESTS
# ============================================================================


def test_numeric_inputs_are_coerced_to_decimal():
    """Test ints, strings and floats become exact Decimals."""
    dims = _dims(height="12.5", width=10, length=0.1, density_range_start="200")

    assert dims.height == Decimal("12.5")
    assert dims.width == Decimal("10")
    assert dims.length == Decimal("0.1")
    assert dims.density_range_start == Decimal("200")


def test_volume_converts_cubic_centimetres_to_cubic_metres():
    """Test 50x50x50 cm = 0.125 m³."""
    assert _dims().volume_m3() == Decimal("0.125")


def test_cubic_weight_uses_density_range_start():
    """Test 0.125 m³ at 200 kg/m³ = 25 kg."""
    dims = _dims(density_range_start=200, density_range_end=300)

    assert dims.cubic_weight() == Decimal("25")
    assert dims.has_density() is True


def test_cubic_weight_absent_without_density():
    """Test cubic weight is None when no density is configured."""
    dims = _dims()

    assert dims.cubic_weight() is None
    assert dims.has_density() is False


def test_package_kind_is_stripped():
    """Test package kind whitespace is trimmed."""
    assert _dims(package_kind="  Tambor ").package_kind == "Tambor"


def test_to_dict_serialises_decimals_as_strings():
    """Test to_dict() output is JSON friendly."""
    data = _dims(thousand_unit_weight=300).to_dict()

    assert data["height"] == "50"
    assert data["thousand_unit_weight"] == "300"
    assert data["density_range_start"] is None


def test_dimensions_are_immutable():
    """Test frozen dataclass rejects attribute assignment."""
    dims = _dims()
    with pytest.raises(FrozenInstanceError):
        dims.height = Decimal("1")


# ============================================================================
# VALIDATION TESTS
# ============================================================================


@pytest.mark.parametrize(
    "field_name",
    ["height", "width", "length", "nominal_weight", "package_weight", "minimum_quantity"],
)
@pytest.mark.parametrize("bad_value", [0, -1, None])
def test_required_fields_must_be_positive(field_name, bad_value):
    """Test required numeric fields reject zero, negative and missing values."""
    with pytest.raises(InvalidProductDimensionsError) as exc_info:
        _dims(**{field_name: bad_value})

    assert exc_info.value.field_name == field_name


@pytest.mark.parametrize(
    "field_name", ["thousand_unit_weight", "density_range_start", "density_range_end"]
)
def test_optional_fields_must_be_positive_when_present(field_name):
    """Test optional numeric fields reject zero."""
    with pytest.raises(InvalidProductDimensionsError):
        _dims(**{field_name: 0})


def test_non_numeric_value_is_rejected():
    """Test unparsable numeric strings raise the domain error."""
    with pytest.raises(InvalidProductDimensionsError, match="height must be a number"):
        _dims(height="tall")


def test_inverted_density_range_is_rejected():
    """Test density_range_end lower than start is invalid."""
    with pytest.raises(InvalidProductDimensionsError) as exc_info:
        _dims(density_range_start=300, density_range_end=200)

    assert exc_info.value.field_name == "density_range_end"


@pytest.mark.parametrize("package_kind", ["", "   ", None])
def test_blank_package_kind_is_rejected(package_kind):
    """Test package kind is required."""
    with pytest.raises(InvalidProductDimensionsError):
        _dims(package_kind=package_kind)
