"""
Runtime Configuration Store.

Settings are read from the `[tool.protoclass]` table of the nearest
`pyproject.toml` and can be overridden by explicit arguments.

Example::

    [tool.protoclass]
    strict_mode = true
    non_null_prefixes = ["!"]
    strip_template_arguments = true
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Configuration container for the conversion engine.
  """

  strict_mode: bool = Field(False, description="If True, any diagnostic marks the conversion as failed.")
  non_null_prefixes: List[str] = Field(
    default_factory=lambda: ["!"],
    description="Qualifiers stripped from the front of an @extends type reference.",
  )
  strip_template_arguments: bool = Field(
    True,
    description="Drop `<...>` template arguments from @extends references (`Base<T>` -> `Base`).",
  )
  log_mutations: bool = Field(False, description="Log every promotion and member merge.")

  @field_validator("non_null_prefixes")
  @classmethod
  def validate_prefixes(cls, v: List[str]) -> List[str]:
    """
    Rejects empty or whitespace prefixes.

    Args:
        v (List[str]): Raw prefixes.

    Returns:
        List[str]: The prefixes, unchanged.

    Raises:
        ValueError: If a prefix is empty or contains whitespace.
    """
    for prefix in v:
      if not prefix or prefix != prefix.strip() or any(c.isspace() for c in prefix):
        raise ValueError(f"Invalid non-null prefix: {prefix!r}")
    return v

  @classmethod
  def load(
    cls,
    strict_mode: Optional[bool] = None,
    non_null_prefixes: Optional[List[str]] = None,
    strip_template_arguments: Optional[bool] = None,
    log_mutations: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies explicit overrides.

    Args:
        strict_mode (Optional[bool]): Override for strict mode.
        non_null_prefixes (Optional[List[str]]): Override for stripped qualifiers.
        strip_template_arguments (Optional[bool]): Override for template stripping.
        log_mutations (Optional[bool]): Override for mutation logging.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    overrides: Dict[str, Any] = {
      "strict_mode": strict_mode,
      "non_null_prefixes": non_null_prefixes,
      "strip_template_arguments": strip_template_arguments,
      "log_mutations": log_mutations,
    }
    merged = dict(toml_config)
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = set(cls.model_fields)
    return cls(**{k: v for k, v in merged.items() if k in known})


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The `[tool.protoclass]` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("protoclass", {}), parent

  return {}, None
