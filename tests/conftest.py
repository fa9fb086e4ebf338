"""Shared fixtures."""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru messages (WARNING and above) emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda msg: messages.append(str(msg)), format="{level} {message}", level="WARNING"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def write_mapping(tmp_path):
    """Write a YAML mapping file and return its path."""

    def _write(inbox, mappings=None, name="mapping.yaml"):
        lines = [f"delivery_car: {inbox}"]
        if mappings is not None:
            lines.append("mappings:")
            for alias, dest in mappings.items():
                lines.append(f"  {alias}: {dest}")
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write
