"""Unit tests for the error hierarchy."""

from __future__ import annotations

import json

from tripwire.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from tripwire.kernel.categories import ANY_FAILURE
from tripwire.kernel.errors import ApplicationError, BaseError
from tripwire.resilience.circuit_breaker import (
    CategoryConflictError,
    InvalidConfigurationError,
    InvalidToleranceError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"

    def test_log_fields(self) -> None:
        err = BaseError("bad", code="bad_code", detail={"k": 1})
        assert err.log_fields() == {"code": "bad_code", "error": "bad", "detail": {"k": 1}}


class TestHierarchy:
    def test_config_errors_are_application_errors(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_interpreter_errors_are_config_errors(self) -> None:
        assert issubclass(InvalidConfigurationError, ConfigError)
        assert issubclass(CategoryConflictError, InvalidConfigurationError)
        assert issubclass(InvalidToleranceError, InvalidConfigurationError)

    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("APP_PORT")
        assert err.setting_name == "APP_PORT"
        assert err.code == "missing_required_setting"
        assert err.detail == {"setting": "APP_PORT"}

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("unit", "x", "unknown")
        assert "unit" in err.message
        assert err.reason == "unknown"
        assert err.detail == {"setting": "unit", "value": "x", "reason": "unknown"}

    def test_invalid_setting_value_keeps_cause(self) -> None:
        cause = ValueError("could not convert")
        err = InvalidSettingValueError("APP_PORT", "eighty", str(cause), cause=cause)
        assert err.__cause__ is cause
        assert "could not convert" in err.to_dict()["cause"]

    def test_category_conflict_message(self) -> None:
        network = ANY_FAILURE.child("network")
        err = CategoryConflictError(network.child("timeout"), network)
        assert "subtype" in err.message
        assert err.detail == {"trip": "timeout", "ignore": "network"}

    def test_category_conflict_same_category_message(self) -> None:
        network = ANY_FAILURE.child("network")
        err = CategoryConflictError(network, network)
        assert "'network' is ignored" in err.message

    def test_invalid_tolerance(self) -> None:
        err = InvalidToleranceError("duration", -1)
        assert err.message == "Tolerance duration must be non-negative, got -1"
        assert err.code == "invalid_tolerance"
