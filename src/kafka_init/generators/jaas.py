"""JAAS configuration builder for FWSS credential Secrets.

This module assembles the KafkaServer login-module block from the credential
Secrets of the cluster's namespace. Secrets are selected by name prefix and
exactly one of them must be the admin Secret, whose entry becomes the broker's
own username and password.
"""

import base64
import binascii
from collections.abc import Sequence

from icecream import ic

from kafka_init import console
from kafka_init.exceptions import (
    AdminCredentialMissingError,
    AmbiguousAdminCredentialError,
    CredentialDecodeError,
    NoCredentialsError,
    NoMatchingCredentialsError,
)
from kafka_init.models import CredentialObject

LOGIN_MODULE = "org.apache.kafka.common.security.plain.PlainLoginModule"
ADMIN_SUFFIX = "-admin"


def decode_payload(credential: CredentialObject, entry_name: str) -> str:
    """Decode a base64 Secret entry into stripped UTF-8 text.

    Args:
        credential: The Secret holding the entry.
        entry_name: The entry to decode.

    Returns:
        The decoded value without surrounding whitespace.

    Raises:
        CredentialDecodeError: If the payload is not base64-encoded UTF-8.

    """
    try:
        return base64.b64decode(credential.entries[entry_name], validate=True).decode("utf-8").strip()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise CredentialDecodeError(
            f"Entry '{entry_name}' of secret {credential.name} is not valid base64-encoded UTF-8: {e}"
        ) from e


def find_admin_credential(credentials: Sequence[CredentialObject], name_prefix: str) -> CredentialObject:
    """Return the single admin Secret.

    Args:
        credentials: The Secrets of the namespace.
        name_prefix: The FWSS Secret name prefix.

    Returns:
        The only Secret whose name starts with '<prefix>-admin'.

    Raises:
        AdminCredentialMissingError: If there is no admin Secret or it has no entries.
        AmbiguousAdminCredentialError: If several Secrets match the admin prefix.

    """
    admin_prefix = name_prefix + ADMIN_SUFFIX
    admins = [credential for credential in credentials if credential.name.startswith(admin_prefix)]

    if not admins:
        raise AdminCredentialMissingError(f"No admin secrets starting with '{admin_prefix}' found")
    if len(admins) > 1:
        names = ", ".join(credential.name for credential in admins)
        raise AmbiguousAdminCredentialError(
            f"More than one admin secret starting with '{admin_prefix}' found: {names}"
        )

    admin = admins[0]
    if not admin.entries:
        raise AdminCredentialMissingError(f"Admin secret {admin.name} has no entries")
    return admin


def build_auth_config(namespace: str, credentials: Sequence[CredentialObject], name_prefix: str) -> str:
    """Build the JAAS configuration from the FWSS credential Secrets.

    Every entry of every Secret matching the prefix, the admin Secret
    included, is declared as a PLAIN user. When the admin Secret carries
    several entries, the one with the smallest entry name is the admin
    identity.

    Args:
        namespace: The namespace the Secrets were listed in.
        credentials: The Secrets of the namespace.
        name_prefix: The FWSS Secret name prefix.

    Returns:
        The complete KafkaServer block.

    Raises:
        NoCredentialsError: If there are no Secrets.
        NoMatchingCredentialsError: If no Secret matches the prefix.
        AdminCredentialMissingError: If there is no usable admin Secret.
        AmbiguousAdminCredentialError: If several admin Secrets exist.
        CredentialDecodeError: If an entry cannot be decoded.

    """
    if not credentials:
        raise NoCredentialsError(f"No secrets found in namespace {namespace}")

    matching = [credential for credential in credentials if credential.name.startswith(name_prefix)]
    if not matching:
        raise NoMatchingCredentialsError(f"No secrets starting with '{name_prefix}' found in namespace {namespace}")
    ic([credential.name for credential in matching])

    admin = find_admin_credential(credentials, name_prefix)
    admin_user = min(admin.entries)
    if len(admin.entries) > 1:
        console.warning(
            f"Admin secret {admin.name} has {len(admin.entries)} entries, using ", console.highlight(admin_user)
        )
    admin_password = decode_payload(admin, admin_user)

    lines = [
        "KafkaServer {\n",
        f"  {LOGIN_MODULE} required\n",
        f'  username="{admin_user}"\n',
        f'  password="{admin_password}"\n',
    ]
    for credential in matching:
        for entry_name in credential.entries:
            lines.append(f'  user_{entry_name}="{decode_payload(credential, entry_name)}"\n')

    jaas_config = "".join(lines)
    # Terminate the option list of the login module
    return jaas_config[:-1] + ";\n};"
