import pytest
from pydantic import ValidationError as PydanticValidationError

from record_store_api.app.schemas.record import RecordCreate, RecordFilter, RecordUpdate, normalise_email


def test_normalise_email():
    assert normalise_email(" Foo@Bar.ORG ") == "foo@bar.org"
    assert normalise_email(None) is None


@pytest.mark.parametrize("email", ["foo@bar", "a@b..c", "a@.b.c", "a@b.c.", "@x.com", "a b@x.com"])
def test_record_create_rejects_malformed_email(email):
    with pytest.raises(PydanticValidationError):
        RecordCreate(name="Ann", email=email)


def test_record_update_rejects_malformed_email():
    with pytest.raises(PydanticValidationError):
        RecordUpdate(email="a@b..c")


def test_record_create_strips_strings():
    record = RecordCreate(name="  Ann ", email="ANN@x.com")
    assert record.name == "Ann"
    assert record.email == "ann@x.com"


def test_record_update_tracks_supplied_fields():
    update = RecordUpdate.model_validate({"age": None})
    assert update.model_dump(exclude_unset=True) == {"age": None}


def test_record_update_rejects_null_name():
    with pytest.raises(PydanticValidationError):
        RecordUpdate.model_validate({"name": None})


def test_filter_without_criteria_matches_everything():
    from datetime import datetime, timezone
    from record_store_api.app.schemas.record import RecordRead

    now = datetime.now(timezone.utc)
    record = RecordRead(id=1, name="Ann", created_at=now, updated_at=now)
    assert RecordFilter().matches(record)
    assert not RecordFilter(min_age=1).matches(record)
