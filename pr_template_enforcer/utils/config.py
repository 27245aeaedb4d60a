"""
Configuration management for the enforcer.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv
from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate

from ..constants import DEFAULT_LABEL_NAME
from ..exceptions import ConfigurationError
from .monitoring import DiagnosticLogger, default_logger

# Load environment variables from .env file
load_dotenv()

STRING_LIST_SCHEMA = {"type": "array", "items": {"type": "string"}}

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def _input_key(name: str) -> str:
    """Environment variable name GitHub Actions uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Get an action input value, trimmed.

    Args:
        name: Input name as declared in action.yml (e.g. "required-sections")
        env: Environment mapping, defaults to os.environ

    Returns:
        The input value, or an empty string when unset
    """
    env = os.environ if env is None else env
    return env.get(_input_key(name), "").strip()


def get_boolean_input(name: str, env: Optional[Mapping[str, str]] = None) -> bool:
    """Get a boolean action input.

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    value = get_input(name, env)
    if not value or value in FALSE_VALUES:
        return False
    if value in TRUE_VALUES:
        return True
    raise ConfigurationError(
        f"Input '{name}' must be one of: true | True | TRUE | false | False | FALSE"
    )


def parse_json_input(
    name: str,
    default: str,
    env: Optional[Mapping[str, str]] = None,
    logger: Optional[DiagnosticLogger] = None,
) -> List[str]:
    """Parse a JSON list-of-strings input value.

    Args:
        name: The name of the input
        default: Default JSON string if input is not provided or invalid
        env: Environment mapping, defaults to os.environ
        logger: Optional diagnostic logger

    Returns:
        Parsed list of strings
    """
    logger = logger or default_logger
    raw = get_input(name, env) or default
    try:
        value = json.loads(raw)
        validate(instance=value, schema=STRING_LIST_SCHEMA)
    except (json.JSONDecodeError, SchemaValidationError) as e:
        logger.log_warning(
            "parse_json_input",
            {"input": name, "value": raw, "error": str(e).splitlines()[0], "using": default},
        )
        value = json.loads(default)
    return value


@dataclass
class EnforcerConfig:
    """Configuration for a template check run."""

    github_token: str = ""
    required_sections: List[str] = field(default_factory=list)
    skip_users: List[str] = field(default_factory=list)
    skip_service_accounts: List[str] = field(default_factory=list)
    jira_pattern: str = ""
    label_name: str = DEFAULT_LABEL_NAME
    enforce_template: bool = False
    require_task_completion: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[DiagnosticLogger] = None,
    ) -> "EnforcerConfig":
        """Create config from GitHub Actions ``INPUT_*`` environment variables.

        Args:
            env: Environment mapping, defaults to os.environ
            logger: Optional diagnostic logger

        Returns:
            EnforcerConfig instance

        Raises:
            ConfigurationError: If the token is missing or a boolean input is invalid
        """
        env = os.environ if env is None else env
        token = get_input("github-token", env) or env.get("GITHUB_TOKEN", "")
        if not token:
            raise ConfigurationError("Input required and not supplied: github-token")

        return cls(
            github_token=token,
            required_sections=parse_json_input("required-sections", "[]", env, logger),
            skip_users=parse_json_input("skip-users", "[]", env, logger),
            skip_service_accounts=parse_json_input("skip-service-accounts", "[]", env, logger),
            jira_pattern=get_input("jira-pattern", env),
            label_name=get_input("label-name", env) or DEFAULT_LABEL_NAME,
            enforce_template=get_boolean_input("enforce-template", env),
            require_task_completion=get_boolean_input("require-task-completion", env),
            log_level=get_input("log-level", env) or "INFO",
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnforcerConfig":
        """Create config from dictionary.

        Args:
            data: Dictionary containing configuration values

        Returns:
            EnforcerConfig instance

        Raises:
            ConfigurationError: If a list setting is not a list of strings
        """
        for key in ("required_sections", "skip_users", "skip_service_accounts"):
            if key in data:
                try:
                    validate(instance=data[key], schema=STRING_LIST_SCHEMA)
                except SchemaValidationError as e:
                    raise ConfigurationError(f"Invalid '{key}': {e.message}") from e
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def from_json(cls, path: Path) -> "EnforcerConfig":
        """Load config from JSON file.

        Args:
            path: Path to JSON config file

        Returns:
            EnforcerConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        with open(path) as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary, leaving out the token."""
        data = asdict(self)
        data.pop("github_token")
        return data
