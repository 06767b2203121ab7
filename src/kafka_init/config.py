"""Init container configuration.

This module turns the container environment into a typed, immutable
InitConfig. Every recognized variable is declared once in a fixed table of
ConfigParameter entries, each with its parser and default.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NamedTuple

from icecream import ic

from kafka_init import console
from kafka_init.exceptions import ConfigError
from kafka_init.models import AddressType

NAMESPACE_FILE_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"

DEFAULT_INIT_FOLDER = "/opt/kafka/init"
DEFAULT_FWSS_SECRETS_PREFIX = "fwss"


def parse_string(value: str) -> str:
    """Return the value unchanged."""
    return value


def parse_non_empty_string(value: str) -> str:
    """Return the value, rejecting empty text.

    Raises:
        ValueError: If the value is empty.

    """
    if not value:
        raise ValueError("value must not be empty")
    return value


def parse_optional_string(value: str) -> str | None:
    """Return the value, treating empty text as unset."""
    return value or None


def parse_boolean(value: str) -> bool:
    """Parse the exact text 'true' or 'false'.

    Raises:
        ValueError: If the value is neither 'true' nor 'false'.

    """
    match value:
        case "true":
            return True
        case "false":
            return False
        case _:
            raise ValueError("expected 'true' or 'false'")


def parse_address_type(value: str) -> AddressType | None:
    """Parse an optional address type name.

    Raises:
        ValueError: If the value names no known address type.

    """
    if not value:
        return None
    return AddressType.parse(value)


class ConfigParameter(NamedTuple):
    """Declaration of one environment variable.

    Attributes:
        key: The environment variable name.
        field: The InitConfig field the parsed value is stored in.
        parser: Converts the raw text into the typed value.
        default: Raw text used when the variable is absent, None when required
            or when the field has no value by default.
        required: Whether absence is a configuration error.

    """

    key: str
    field: str
    parser: Callable[[str], Any]
    default: str | None = None
    required: bool = False


CONFIG_PARAMETERS: tuple[ConfigParameter, ...] = (
    ConfigParameter("INIT_FOLDER", "init_folder", parse_string, DEFAULT_INIT_FOLDER),
    ConfigParameter("NODE_NAME", "node_name", parse_non_empty_string, required=True),
    ConfigParameter("RACK_TOPOLOGY_KEY", "rack_topology_key", parse_optional_string),
    ConfigParameter("EXTERNAL_ADDRESS", "external_address", parse_boolean, "false"),
    ConfigParameter("EXTERNAL_ADDRESS_TYPE", "address_type", parse_address_type),
    ConfigParameter("FWSS_SECRETS_PREFIX", "fwss_secrets_prefix", parse_string, DEFAULT_FWSS_SECRETS_PREFIX),
    ConfigParameter(
        "AUTHENTICATION_IS_SASL_SCRAM_AND_PLAIN",
        "authentication_is_sasl_scram_and_plain",
        parse_string,
        "false",
    ),
)


def key_names() -> frozenset[str]:
    """Return the names of all recognized environment variables."""
    return frozenset(parameter.key for parameter in CONFIG_PARAMETERS)


@dataclass(frozen=True, slots=True)
class InitConfig:
    """Resolved configuration of one init container run.

    Attributes:
        node_name: Kubernetes node the pod is scheduled on.
        init_folder: Directory the generated files are written to.
        rack_topology_key: Node label holding the rack id, None disables rack output.
        external_address: Whether the external address file is written.
        address_type: Address type preferred for the default address.
        fwss_secrets_prefix: Name prefix of the credential Secrets.
        authentication_is_sasl_scram_and_plain: Raw value of the SASL mode flag.
        namespace_file: Service account file holding the pod namespace.

    """

    node_name: str
    init_folder: str = DEFAULT_INIT_FOLDER
    rack_topology_key: str | None = None
    external_address: bool = False
    address_type: AddressType | None = None
    fwss_secrets_prefix: str = DEFAULT_FWSS_SECRETS_PREFIX
    authentication_is_sasl_scram_and_plain: str = "false"
    namespace_file: str = NAMESPACE_FILE_PATH

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "InitConfig":
        """Build the configuration from an environment mapping.

        Unknown variables are ignored and absent optional variables take
        their defaults.

        Args:
            env: The environment, usually os.environ.

        Returns:
            The validated configuration.

        Raises:
            ConfigError: If a required variable is missing or a value cannot be parsed.

        """
        values: dict[str, Any] = {}
        for parameter in CONFIG_PARAMETERS:
            raw = env.get(parameter.key)
            if raw is None:
                if parameter.required:
                    raise ConfigError(f"Missing required environment variable {parameter.key}")
                raw = parameter.default
            if raw is None:
                values[parameter.field] = None
                continue
            try:
                values[parameter.field] = parameter.parser(raw)
            except ValueError as e:
                raise ConfigError(f"Invalid value '{raw}' for {parameter.key}: {e}") from e

        ic(values)
        return cls(**values)

    @property
    def is_sasl_scram_and_plain(self) -> bool:
        """Whether the listener authentication is sasl_scram_and_plain."""
        return self.authentication_is_sasl_scram_and_plain == "true"

    def get_namespace(self) -> str:
        """Read the pod namespace from the service account file.

        The file is read on every call rather than at construction.

        Returns:
            The namespace, or an empty string if the file cannot be read.

        """
        try:
            return Path(self.namespace_file).read_text(encoding="utf-8").strip()
        except OSError as e:
            console.error(f"Reading namespace file {self.namespace_file} failed: {e}")
            return ""

    def summary(self) -> dict[str, str]:
        """Return the configuration as display labels and values."""
        return {
            "Node name": self.node_name,
            "Rack topology key": str(self.rack_topology_key),
            "External address": str(self.external_address).lower(),
            "Init folder": self.init_folder,
            "Address type": self.address_type.value if self.address_type else "None",
            "FWSS secrets prefix": self.fwss_secrets_prefix,
            "SASL SCRAM and PLAIN": str(self.is_sasl_scram_and_plain).lower(),
        }


def resolve_config(env: Mapping[str, str]) -> InitConfig:
    """Resolve the init container configuration from an environment mapping.

    Args:
        env: The environment, usually os.environ.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If a required variable is missing or a value cannot be parsed.

    """
    return InitConfig.from_env(env)
