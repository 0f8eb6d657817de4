import pytest
from types import SimpleNamespace
from unittest.mock import Mock

from models.record import DictRecord, Record, read_attribute


@pytest.mark.unit
class TestRecords:

    def test_dict_record_get_attribute(self):
        """Test mapping-backed records hand out values by key."""
        record = DictRecord({"first_name": "Ada"}, age=36)

        assert record.get_attribute("first_name") == "Ada"
        assert record.get_attribute("age") == 36
        assert record.get_attribute("missing") is None
        assert record.to_dict() == {"first_name": "Ada", "age": 36}

    def test_dict_record_dotted_keys(self):
        """Test dotted keys walk nested mappings unless stored literally."""
        record = DictRecord({"address": {"city": "London"}, "a.b": "literal"})

        assert record.get_attribute("address.city") == "London"
        assert record.get_attribute("address.zip") is None
        assert record.get_attribute("a.b") == "literal"

    def test_dict_record_attribute_access(self):
        """Test templates can read values as attributes."""
        record = DictRecord(first_name="Ada")

        assert record.first_name == "Ada"
        with pytest.raises(AttributeError):
            record.last_name

    def test_dict_record_is_record(self):
        """Test the protocol is satisfied."""
        assert isinstance(DictRecord(), Record)

    def test_read_attribute_prefers_get_attribute(self):
        """Test records exposing get_attribute are asked directly."""
        record = Mock()
        record.get_attribute.return_value = "value"

        assert read_attribute(record, "address.city") == "value"
        record.get_attribute.assert_called_once_with("address.city")

    def test_read_attribute_plain_objects(self):
        """Test plain objects and mappings are supported."""
        obj = SimpleNamespace(address=SimpleNamespace(city="Paris"))

        assert read_attribute(obj, "address.city") == "Paris"
        assert read_attribute(obj, "address.zip") is None
        assert read_attribute({"city": "Rome"}, "city") == "Rome"
        assert read_attribute(None, "city") is None

    def test_orm_row_get_attribute(self, sample_person):
        """Test ORM rows expose columns and relationships."""
        assert sample_person.get_attribute("first_name") == sample_person.first_name
        assert sample_person.get_attribute("address.city") == sample_person.address.city
        assert sample_person.get_attribute("missing") is None

    def test_orm_row_without_relation(self, db_session):
        """Test dotted keys through an empty relationship yield None."""
        from tests.record_models import Person

        person = Person(first_name="Ada")
        db_session.add(person)
        db_session.commit()

        assert person.get_attribute("address.city") is None
