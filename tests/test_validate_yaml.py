#!/usr/bin/env python3
"""Tests for validate_yaml schema validation."""

from validate_yaml import load_schema, validate_logbook_file, main


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_returns_dict(self):
        schema = load_schema()
        assert isinstance(schema, dict)

    def test_has_expected_structure(self):
        schema = load_schema()
        assert "fuel" in schema["properties"]
        assert "maintenance" in schema["properties"]


class TestValidateLogbookFile:
    """Tests for validate_logbook_file function."""

    def test_valid_minimal_returns_no_errors(self, tmp_path):
        """Valid minimal logbook returns empty error list."""
        path = tmp_path / "valid.yaml"
        path.write_text("""
fuel:
  - id: a1
    date: 2024-01-05
    totalValue: 100
    pricePerLiter: 5.5
    kmEnd: 1000
    fuelType: GASOLINA
maintenance:
  - id: m1
    date: '2024-03-01'
    serviceType: Outro
    mileage: 1500
    cost: 50
""", encoding="utf-8")
        errors = validate_logbook_file(path, load_schema())
        assert errors == []

    def test_missing_required_field_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
fuel:
  - id: a1
    date: '2024-01-05'
    totalValue: 100
    # pricePerLiter missing
    kmEnd: 1000
""")
        errors = validate_logbook_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)
        assert any("at path: fuel.0" in e for e in errors)

    def test_unknown_fuel_type_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
fuel:
  - id: a1
    date: '2024-01-05'
    totalValue: 100
    pricePerLiter: 5
    kmEnd: 1000
    fuelType: DIESEL
""")
        errors = validate_logbook_file(path, load_schema())
        assert len(errors) >= 1

    def test_invalid_yaml_returns_parse_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("""
fuel:
  - id: a1
    invalid: [unclosed
""")
        errors = validate_logbook_file(path, load_schema())
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file_returns_errors(self, tmp_path):
        errors = validate_logbook_file(tmp_path / "does_not_exist.yaml", load_schema())
        assert any(e.startswith("Error") for e in errors)


class TestMain:
    """Tests for validate_yaml main."""

    def test_exit_codes(self, tmp_path, capsys):
        good = tmp_path / "good.yaml"
        good.write_text("fuel: []\n")
        bad = tmp_path / "bad.yaml"
        bad.write_text("fuel: 3\n")

        assert main([str(good)]) == 0
        assert main([str(good), str(bad)]) == 1
        out = capsys.readouterr().out
        assert "OK: good.yaml" in out
        assert "FAIL: bad.yaml" in out
