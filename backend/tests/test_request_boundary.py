import pytest

from workshop_queue.core.errors import JobValidationError
from workshop_queue.core.validation import describe_rules
from workshop_queue.services.request_boundary import parse_job_create, parse_job_update

VALID = {
    "regNumber": "GT-1234-22",
    "customerName": "Al",
    "serviceType": "Full Service",
    "brand": "Toyota",
    "status": "checked-in",
    "branch": "CFAO Airport",
}


def test_two_character_customer_name_is_accepted():
    job = parse_job_create(VALID)
    assert job.customer_name == "Al"
    assert job.is_priority is False


def test_one_character_customer_name_is_rejected():
    with pytest.raises(JobValidationError) as excinfo:
        parse_job_create({**VALID, "customerName": "A"})

    assert excinfo.value.field == "customerName"
    assert excinfo.value.message == "Customer name must be at least 2 characters"


def test_short_reg_number_is_rejected():
    with pytest.raises(JobValidationError) as excinfo:
        parse_job_create({**VALID, "regNumber": "GT1"})
    assert excinfo.value.field == "regNumber"


@pytest.mark.parametrize("field", ["serviceType", "brand", "branch"])
def test_empty_required_strings_are_rejected(field):
    with pytest.raises(JobValidationError) as excinfo:
        parse_job_create({**VALID, field: ""})
    assert excinfo.value.field == field


def test_unknown_status_is_rejected():
    with pytest.raises(JobValidationError) as excinfo:
        parse_job_create({**VALID, "status": "washing"})
    assert excinfo.value.field == "status"


def test_missing_field_is_reported():
    payload = dict(VALID)
    del payload["brand"]
    with pytest.raises(JobValidationError) as excinfo:
        parse_job_create(payload)
    assert excinfo.value.field == "brand"


def test_partial_update_applies_same_rules():
    assert parse_job_update({"status": "in-diagnostics"}).changes() == {"status": "in-diagnostics"}

    with pytest.raises(JobValidationError) as excinfo:
        parse_job_update({"customerName": "A"})
    assert excinfo.value.field == "customerName"


def test_rules_are_exposed_with_wire_names():
    rules = describe_rules()
    assert rules["fields"]["customerName"]["minLength"] == 2
    assert rules["fields"]["regNumber"]["minLength"] == 4
    assert "Toyota" in rules["brands"]
