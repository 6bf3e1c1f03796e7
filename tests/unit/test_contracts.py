"""Тесты для JSON Schema контрактов.

Coverage:
- Валидность самих схем
- Валидация правильных и неправильных данных
- Интеграция с Pydantic моделью Order
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import OrderValidator, SchemaLoader, validate_order
from src.structural.decorator import Order


@pytest.fixture
def valid_order():
    return {"order_id": "A-1", "items": ["book"], "total": 10.0}


class TestSchemaLoader:
    def test_order_schema_is_valid(self):
        schema = SchemaLoader().load_schema("order")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("order") is loader.load_schema("order")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestOrderValidator:
    def test_valid(self, valid_order):
        validate_order(valid_order)
        assert OrderValidator().is_valid(valid_order)

    @pytest.mark.parametrize("missing", ["order_id", "items", "total"])
    def test_required_fields(self, valid_order, missing):
        del valid_order[missing]

        with pytest.raises(ValidationError):
            validate_order(valid_order)

    def test_additional_properties_rejected(self, valid_order):
        valid_order["discount"] = 5

        assert not OrderValidator().is_valid(valid_order)

    def test_negative_total(self, valid_order):
        valid_order["total"] = -0.01

        assert not OrderValidator().is_valid(valid_order)

    def test_iter_errors_reports_all(self):
        errors = list(OrderValidator().iter_errors({"order_id": "", "items": [], "total": -1}))

        assert len(errors) == 3

    def test_pydantic_order_dump_matches_contract(self):
        order = Order(order_id="A-1", items=("book", "pen"), total=3.0)

        validate_order(order.model_dump(mode="json"))
