import pytest
from models import Person
from pydantic import ValidationError
from streams import stream
from utils import format_inline, format_value, measure_performance


class TestFormatValue:
    """Test rendering of terminal results"""

    def test_list_of_persons(self, persons):
        assert format_value(persons) == "[Max, Peter, Pamela, David]"

    def test_mapping(self):
        assert format_value({18: "Max", 23: "Peter;Pamela"}) == "{18=Max, 23=Peter;Pamela}"

    def test_nested(self, persons):
        groups = stream(persons).group_by(lambda p: p.age)
        assert format_value(groups) == "{18=[Max], 23=[Peter, Pamela], 12=[David]}"

    def test_scalars(self):
        assert format_value(19.0) == "19.0"
        assert format_value(34) == "34"
        assert format_value(True) == "true"
        assert format_value(None) == "null"
        assert format_value("text") == "text"

    def test_inline(self):
        assert format_inline(["a1", "a2"]) == "a1 a2 "
        assert format_inline([]) == ""


class TestMeasurePerformance:
    """Test the timing helper"""

    def test_returns_result_and_metrics(self):
        info = measure_performance("to_list", stream(range(100)).map(lambda x: x * 2).to_list)
        assert info["success"] is True
        assert info["result"][:3] == [0, 2, 4]
        assert info["result_size"] == 100
        assert info["execution_time_ms"] >= 0
        assert info["memory_usage_mb"] >= 0

    def test_reraises_errors(self):
        with pytest.raises(KeyError):
            measure_performance("to_map", stream([1, 1]).to_map, lambda x: x, lambda x: x)


class TestPerson:
    """Test the person record"""

    def test_renders_as_name(self):
        assert str(Person(name="Max", age=18)) == "Max"

    def test_value_equality_and_hashing(self):
        assert Person(name="Max", age=18) == Person(name="Max", age=18)
        assert len({Person(name="Max", age=18), Person(name="Max", age=18)}) == 1

    def test_is_immutable(self):
        person = Person(name="Max", age=18)
        with pytest.raises(ValidationError):
            person.age = 19
