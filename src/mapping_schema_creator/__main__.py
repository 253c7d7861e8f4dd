"""Module entry point for `python -m mapping_schema_creator`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
