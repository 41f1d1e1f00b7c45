"""Helper modules: schema validation, atomic writes and game version checks."""
