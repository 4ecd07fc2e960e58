"""Tests for the response decision table (gqlhttp.core.resolver)."""

import pytest

from gqlhttp.core.errors import (
    BadRequestError,
    MethodNotAllowedError,
    NotAcceptableError,
    UnsupportedMediaTypeError,
)
from gqlhttp.core.media_types import MediaType
from gqlhttp.core.resolver import INTERNAL_ERROR_MESSAGE, resolve
from gqlhttp.runtime.executor import ExecutionOutcome

BOTH = [MediaType.GRAPHQL_JSON, MediaType.JSON]

FIELD_ERROR = {"message": "Throws!", "locations": [{"line": 1, "column": 2}], "path": ["thrower"]}
REQUEST_ERROR = {
    "message": "Cannot query field 'unknown' on type 'QueryRoot'.",
    "locations": [{"line": 1, "column": 2}],
}


class TestHttpErrors:
    @pytest.mark.parametrize("media_type", BOTH)
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (BadRequestError("bad"), 400),
            (MethodNotAllowedError("no"), 405),
            (NotAcceptableError("nope"), 406),
            (UnsupportedMediaTypeError("what"), 415),
        ],
    )
    def test_status_is_error_category(self, error, status_code, media_type) -> None:
        decision = resolve(error, media_type)
        assert decision.status_code == status_code
        assert decision.body == {"errors": [{"message": error.message}]}
        assert decision.content_type == media_type.content_type

    def test_method_not_allowed_sets_allow(self) -> None:
        decision = resolve(MethodNotAllowedError("no"), MediaType.JSON)
        assert decision.headers == {"Allow": "POST"}

    def test_other_errors_have_no_extra_headers(self) -> None:
        assert resolve(BadRequestError("bad"), MediaType.JSON).headers == {}


class TestExecutionOutcomes:
    @pytest.mark.parametrize("media_type", BOTH)
    def test_data_without_errors(self, media_type) -> None:
        decision = resolve(ExecutionOutcome(data={"test": "Hello World"}), media_type)
        assert decision.status_code == 200
        assert decision.body == {"data": {"test": "Hello World"}}

    @pytest.mark.parametrize("media_type", BOTH)
    def test_field_errors(self, media_type) -> None:
        outcome = ExecutionOutcome(data={"thrower": None}, errors=[FIELD_ERROR])
        decision = resolve(outcome, media_type)
        assert decision.status_code == 200
        assert decision.body == {"data": {"thrower": None}, "errors": [FIELD_ERROR]}

    @pytest.mark.parametrize("media_type", BOTH)
    def test_null_data_after_execution(self, media_type) -> None:
        outcome = ExecutionOutcome(data=None, errors=[FIELD_ERROR])
        decision = resolve(outcome, media_type)
        assert decision.status_code == 200
        assert decision.body == {"data": None, "errors": [FIELD_ERROR]}

    def test_request_error_graphql_json(self) -> None:
        outcome = ExecutionOutcome(errors=[REQUEST_ERROR], request_error=True)
        decision = resolve(outcome, MediaType.GRAPHQL_JSON)
        assert decision.status_code == 400
        assert decision.body == {"errors": [REQUEST_ERROR]}
        assert decision.content_type == "application/graphql+json; charset=UTF-8"

    def test_request_error_json(self) -> None:
        outcome = ExecutionOutcome(errors=[REQUEST_ERROR], request_error=True)
        decision = resolve(outcome, MediaType.JSON)
        assert decision.status_code == 200
        assert decision.body == {"errors": [REQUEST_ERROR]}
        assert "data" not in decision.body

    def test_extensions(self) -> None:
        outcome = ExecutionOutcome(data={"test": "x"}, extensions={"cost": 1})
        assert resolve(outcome, MediaType.JSON).body == {"data": {"test": "x"}, "extensions": {"cost": 1}}


class TestInternalErrors:
    @pytest.mark.parametrize("media_type", BOTH)
    def test_exception_is_500(self, media_type) -> None:
        decision = resolve(RuntimeError("database password is hunter2"), media_type)
        assert decision.status_code == 500
        assert decision.body == {"errors": [{"message": INTERNAL_ERROR_MESSAGE}]}
        assert "hunter2" not in str(decision.body)
        assert decision.content_type == media_type.content_type
