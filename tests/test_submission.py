from __future__ import annotations

import pytest

from backend.core.errors import ConfigurationError, UpstreamError, ValidationError
from backend.core.models import JobStatus
from backend.core.registry import JobRegistry
from backend.services.submission import REQUIRED_FIELDS, SubmissionGateway, validate_submission

from conftest import FakeFrammerClient, make_submission


@pytest.fixture
def gateway(settings, registry: JobRegistry, frammer: FakeFrammerClient) -> SubmissionGateway:
    return SubmissionGateway(registry, frammer, settings)


def test_successful_submission_seeds_pending_record(gateway, registry, frammer) -> None:
    out = gateway.submit(make_submission())

    assert out == {"data": {"id": 101}}
    assert frammer.calls == [(
        {"videoUrl": "https://x/a.mp4", "language": "en", "contentType": "podcast", "outputType": "vertical"},
        "test-key",
    )]
    record = registry.get("101")
    assert record.status is JobStatus.pending
    assert record.request["contentType"] == "podcast"
    assert record.initial_response == {"data": {"id": 101}}


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
@pytest.mark.parametrize("blank", [None, "", "   ", []])
def test_missing_field_rejected_without_outbound_call(gateway, registry, frammer, field, blank) -> None:
    with pytest.raises(ValidationError) as exc:
        gateway.submit(make_submission(**{field: blank}))

    assert exc.value.status_code == 400
    assert field in exc.value.details["missing"]
    assert frammer.calls == []
    assert len(registry) == 0


def test_output_type_list_is_comma_joined() -> None:
    cleaned = validate_submission(make_submission(outputType=["vertical", " square ", ""]))
    assert cleaned["outputType"] == "vertical,square"


def test_missing_api_key_is_configuration_error(settings, registry, frammer) -> None:
    settings.FRAMMER_API_KEY = None
    gateway = SubmissionGateway(registry, frammer, settings)

    with pytest.raises(ConfigurationError):
        gateway.submit(make_submission())
    assert frammer.calls == []


def test_validation_checked_before_configuration(settings, registry, frammer) -> None:
    settings.FRAMMER_API_KEY = None
    gateway = SubmissionGateway(registry, frammer, settings)

    with pytest.raises(ValidationError):
        gateway.submit(make_submission(language=""))


def test_upstream_failure_leaves_registry_untouched(settings, registry) -> None:
    failing = FakeFrammerClient(error=UpstreamError("quota exceeded", status_code=429))
    gateway = SubmissionGateway(registry, failing, settings)

    with pytest.raises(UpstreamError) as exc:
        gateway.submit(make_submission())
    assert exc.value.status_code == 429
    assert len(registry) == 0


def test_response_without_id_is_returned_but_not_tracked(settings, registry) -> None:
    odd = FakeFrammerClient(response={"status": "accepted"})
    gateway = SubmissionGateway(registry, odd, settings)

    assert gateway.submit(make_submission()) == {"status": "accepted"}
    assert len(registry) == 0


def test_n_distinct_submissions_give_n_records(settings, registry) -> None:
    for i in range(5):
        gateway = SubmissionGateway(registry, FakeFrammerClient(response={"data": {"id": i}}), settings)
        gateway.submit(make_submission())
    assert len(registry) == 5
