"""TaskDataSerializer 单元测试"""

import json

import pytest
from tasklist.core.exceptions import TaskDataError
from tasklist.core.serializer import TaskDataSerializer


@pytest.fixture
def serializer() -> TaskDataSerializer:
    return TaskDataSerializer()


class TestReadVariables:
    """payload 解析"""

    def test_object_payload(self, serializer):
        variables = serializer.read_variables('{"orderId": 42, "paid": true}')
        assert variables == {"orderId": 42, "paid": True}

    def test_keeps_payload_order(self, serializer):
        variables = serializer.read_variables('{"b": 1, "a": 2, "c": 3}')
        assert list(variables) == ["b", "a", "c"]

    @pytest.mark.parametrize("payload", [None, ""])
    def test_empty_payload(self, serializer, payload):
        assert serializer.read_variables(payload) == {}

    def test_malformed_json(self, serializer):
        with pytest.raises(TaskDataError) as exc_info:
            serializer.read_variables("{not json")
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_non_object_json(self, serializer):
        with pytest.raises(TaskDataError):
            serializer.read_variables("[1, 2, 3]")


class TestReadFormFields:
    """表单字段解析"""

    def test_field_list(self, serializer):
        fields = serializer.read_form_fields(
            '[{"key": "amount", "type": "number"},'
            ' {"key": "approved", "label": "Approved?", "type": "boolean"}]'
        )
        assert [f.key for f in fields] == ["amount", "approved"]
        assert fields[0].label == "amount"
        assert fields[1].label == "Approved?"
        assert fields[1].type == "boolean"

    def test_empty_list(self, serializer):
        assert serializer.read_form_fields("[]") == []

    def test_malformed_json(self, serializer):
        with pytest.raises(TaskDataError):
            serializer.read_form_fields("[{")

    def test_wrong_shape(self, serializer):
        with pytest.raises(TaskDataError):
            serializer.read_form_fields('{"key": "amount"}')


class TestWriteVariables:
    def test_write_then_read(self, serializer):
        payload = serializer.write_variables({"city": "Zürich", "n": 3})
        assert "Zürich" in payload
        assert serializer.read_variables(payload) == {"city": "Zürich", "n": 3}
