"""Tests for the unified exception taxonomy.

Validates:
- ExtentError hierarchy and structured attributes
- Category classification (validation, permanent, contract)
- ``to_error_dict()`` produces stable payload keys
- All engine exceptions are ExtentError subclasses with stage and code
"""

from __future__ import annotations

from typing import ClassVar

from photo_extent.core.config import ConfigValidationError
from photo_extent.core.exceptions import (
    ContractError,
    ExtentError,
    PermanentError,
    ValidationError,
)
from photo_extent.engine.aspect_ratio import DegenerateExtentError
from photo_extent.engine.extent_tracker import EmptyInputError, MixedHemisphereError
from photo_extent.engine.sexagesimal import UnderflowError
from photo_extent.ingest.records import RecordContractError
from photo_extent.models.angle import ArityMismatchError, MalformedAngleError


class TestExtentErrorBase:
    """ExtentError base class behavior."""

    def test_default_attributes(self) -> None:
        err = ExtentError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False
        assert err.correlation_id == ""

    def test_custom_attributes(self) -> None:
        err = ExtentError(
            "fail",
            stage="aspect_ratio",
            code="DEGENERATE_EXTENT",
            correlation_id="folder-7",
        )
        assert err.stage == "aspect_ratio"
        assert err.code == "DEGENERATE_EXTENT"
        assert err.correlation_id == "folder-7"

    def test_str_is_message(self) -> None:
        err = ExtentError("human-readable error")
        assert str(err) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        err = ExtentError("x", stage="s", code="C", retryable=True, correlation_id="id")
        d = err.to_error_dict()
        assert set(d.keys()) == {
            "category",
            "code",
            "stage",
            "message",
            "retryable",
            "correlation_id",
        }
        assert d["message"] == "x"
        assert d["retryable"] is True


class TestCategoryBases:
    """Category base classes set correct defaults."""

    def test_validation_error(self) -> None:
        err = ValidationError("bad input")
        assert err.retryable is False
        assert err.category == "validation"

    def test_permanent_error(self) -> None:
        err = PermanentError("cannot compute")
        assert err.retryable is False
        assert err.category == "permanent"

    def test_contract_error(self) -> None:
        err = ContractError("schema drift")
        assert err.retryable is False
        assert err.category == "contract"

    def test_uncategorised_error_is_permanent(self) -> None:
        assert ExtentError("x").category == "permanent"
        assert ExtentError("x", retryable=True).category == "permanent"


class TestAllExceptionsAreExtentError:
    """Every custom exception inherits from ExtentError."""

    EXCEPTION_CLASSES: ClassVar[list[type[ExtentError]]] = [
        EmptyInputError,
        MixedHemisphereError,
        ArityMismatchError,
        MalformedAngleError,
        UnderflowError,
        DegenerateExtentError,
        RecordContractError,
        ConfigValidationError,
    ]

    def test_all_subclass_extent_error(self) -> None:
        for cls in self.EXCEPTION_CLASSES:
            assert issubclass(cls, ExtentError), f"{cls.__name__} is not an ExtentError"

    def test_none_retryable_by_default(self) -> None:
        assert EmptyInputError("x").retryable is False
        assert UnderflowError("x").retryable is False
        assert DegenerateExtentError("x").retryable is False


class TestStageAndCode:
    """Every engine exception has a default stage, code and category."""

    def test_empty_input(self) -> None:
        err = EmptyInputError("no points")
        assert err.stage == "extent_tracker"
        assert err.code == "EMPTY_INPUT"
        assert err.category == "validation"

    def test_mixed_hemispheres(self) -> None:
        err = MixedHemisphereError("N and S")
        assert err.code == "MIXED_HEMISPHERES"

    def test_arity_mismatch(self) -> None:
        err = ArityMismatchError(2, 3)
        assert err.stage == "angle_compare"
        assert err.code == "ARITY_MISMATCH"
        assert err.category == "validation"
        assert "2 vs 3" in err.message

    def test_malformed_angle(self) -> None:
        err = MalformedAngleError("minutes", 61, "must be < 60")
        assert (err.stage, err.code) == ("angle", "MALFORMED_ANGLE")
        assert err.message == "Angle.minutes=61: must be < 60"
        assert isinstance(err, ValueError)

    def test_underflow(self) -> None:
        err = UnderflowError("past degrees")
        assert err.stage == "sexagesimal_delta"
        assert err.code == "BORROW_UNDERFLOW"
        assert err.category == "permanent"

    def test_degenerate_extent(self) -> None:
        err = DegenerateExtentError("zero width")
        assert err.stage == "aspect_ratio"
        assert err.code == "DEGENERATE_EXTENT"
        assert err.category == "permanent"

    def test_record_contract(self) -> None:
        err = RecordContractError("bad record", index=3)
        assert err.stage == "ingest"
        assert err.code == "RECORD_CONTRACT_VIOLATION"
        assert err.category == "contract"
        assert err.index == 3

    def test_config_validation(self) -> None:
        err = ConfigValidationError("EXTENT_EQUATOR_LENGTH_M", 0, "must be > 0")
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.key == "EXTENT_EQUATOR_LENGTH_M"
        assert err.to_error_dict()["category"] == "permanent"
