"""Design token loading from defaults, a JSON file and the environment."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..cli.errors import ConfigNotFoundError, ConfigurationError
from ..css_logging import LogCategory, get_category_logger
from .models import TABLE_FIELDS, DesignTokens

logger = get_category_logger(LogCategory.CONFIG)

# Environment variable -> token field
ENV_VARS = {
    "VIBE_CSS_PREFIX": "prefix",
    "VIBE_CSS_NAMESPACE": "variable_namespace",
    "VIBE_CSS_ALLOW_UNPREFIXED": "allow_unprefixed_utilities",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


class TokensLoader:
    """Load ``DesignTokens`` with layered precedence.

    Precedence (highest to lowest):
    1. Explicit overrides
    2. Environment variables
    3. JSON config file
    4. Defaults
    """

    def __init__(self, config_file: Path | str | None = None):
        self.config_file = Path(config_file) if config_file else None

    def load(self, **overrides: Any) -> DesignTokens:
        """Load design tokens from all sources.

        Args:
            **overrides: Field values taking precedence over every other source.
                ``None`` values are ignored.

        Returns:
            Validated, immutable design tokens.

        Raises:
            ConfigNotFoundError: If the config file does not exist.
            ConfigurationError: If the file is unreadable or values are invalid.
        """
        config_dict: dict[str, Any] = {}

        if self.config_file is not None:
            config_dict.update(self._load_file(self.config_file))

        env_count = 0
        for env_var, field_name in ENV_VARS.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if field_name == "allow_unprefixed_utilities":
                config_dict[field_name] = value.strip().lower() in _TRUE_VALUES
            else:
                config_dict[field_name] = value
            env_count += 1
        if env_count > 0:
            logger.debug(f"Applied {env_count} environment variables")

        explicit = {k: v for k, v in overrides.items() if v is not None}
        config_dict.update(explicit)
        if explicit:
            logger.debug(f"Applied {len(explicit)} explicit overrides")

        try:
            return DesignTokens(**config_dict)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid design tokens: {e}",
                config_file=str(self.config_file) if self.config_file else None,
            ) from e

    def _load_file(self, path: Path) -> dict[str, Any]:
        """Read a JSON token file and merge its tables over the defaults."""
        if not path.exists():
            raise ConfigNotFoundError(str(path))

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in token config: {e}", config_file=str(path)
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read token config: {e}", config_file=str(path)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Token config must be a JSON object", config_file=str(path)
            )

        replace = data.pop("replace", False)
        if not isinstance(replace, bool):
            raise ConfigurationError(
                f"'replace' must be true or false, got {replace!r}",
                config_file=str(path),
            )
        if not replace:
            defaults = DesignTokens().to_dict()
            for field_name in TABLE_FIELDS:
                if isinstance(data.get(field_name), dict):
                    merged = defaults[field_name]
                    merged.update(data[field_name])
                    data[field_name] = merged

        logger.debug(
            f"Loaded {len(data)} settings from {path}", extra={"config_file": str(path)}
        )
        return data


def load_tokens(config_file: Path | str | None = None, **overrides: Any) -> DesignTokens:
    """Convenience wrapper around ``TokensLoader.load``."""
    return TokensLoader(config_file).load(**overrides)
