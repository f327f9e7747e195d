#!/usr/bin/env python3
"""Validate logbook YAML files against the schema."""
import sys
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError


class _StringDateLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as plain strings."""


_StringDateLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str
)


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def validate_logbook_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single logbook YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath, encoding="utf-8") as f:
            # Dates are checked as strings, so keep YAML from converting them
            data = yaml.load(f, Loader=_StringDateLoader) or {}
        validate(instance=data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate the given logbook files, or every file in logbooks/."""
    schema = load_schema()
    paths = [Path(p) for p in (argv if argv is not None else sys.argv[1:])]

    if not paths:
        logbooks_dir = Path(__file__).parent / "logbooks"
        if not logbooks_dir.exists():
            print(f"Error: logbooks directory not found: {logbooks_dir}")
            return 1
        paths = list(logbooks_dir.glob("*.yaml")) + list(logbooks_dir.glob("*.yml"))
        if not paths:
            print(f"Warning: No YAML files found in {logbooks_dir}")
            return 0

    all_valid = True
    for filepath in sorted(paths):
        errors = validate_logbook_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
