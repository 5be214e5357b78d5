"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for defect-rules-engine.
# Replace every <REQUIRED> placeholder before running the run command.
# Remove or fill <OPTIONAL> placeholders only when your setup needs them.

dictionary:
  # Defect dictionary file (.yaml, .yml, .json or .xlsx), relative to this file.
  path: "<REQUIRED>"

processing:
  # Number of observations matched in parallel.
  parallelism: 4
  # Urgency used when an observation row leaves URGENCY empty
  # (IMMEDIATE, SHORT_TERM, LONG_TERM or MONITOR).
  # When omitted, urgency is derived from the observation severity.
  # default_urgency: "<OPTIONAL>"

output:
  # Directory for result workbooks; defaults to the input workbook directory.
  # directory: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
