"""Locating the master key used to seal configuration secrets."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum

MASTER_KEY_ENV = "XENOCHAT_MASTER_KEY"
KEYCHAIN_SERVICE_ENV = "XENOCHAT_KEYCHAIN_SERVICE"
KEYCHAIN_ACCOUNT_ENV = "XENOCHAT_KEYCHAIN_ACCOUNT"
DEFAULT_KEYCHAIN_SERVICE = "xenochat.master-key"
DEFAULT_KEYCHAIN_ACCOUNT = "xenochat"

_KEYCHAIN_NOT_FOUND_STATUS = 44


class MasterKeySource(Enum):
    """Where the master key was found."""

    ENVIRONMENT = "environment"
    KEYCHAIN = "keychain"


@dataclass(frozen=True)
class ResolvedMasterKey:
    """A master key together with its origin."""

    value: str
    source: MasterKeySource


class MasterKeyResolveError(Exception):
    """Raised when the keychain lookup fails for a reason other than absence."""


def _read_non_empty_env(name: str) -> str | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value


def _keychain_service() -> str:
    return _read_non_empty_env(KEYCHAIN_SERVICE_ENV) or DEFAULT_KEYCHAIN_SERVICE


def _keychain_account() -> str:
    return (
        _read_non_empty_env(KEYCHAIN_ACCOUNT_ENV)
        or _read_non_empty_env("USER")
        or DEFAULT_KEYCHAIN_ACCOUNT
    )


def _read_keychain() -> str | None:
    service = _keychain_service()
    account = _keychain_account()
    if sys.platform != "darwin":
        return None

    try:
        result = subprocess.run(
            ["security", "find-generic-password", "-s", service, "-a", account, "-w"],
            capture_output=True,
            check=False,
        )
    except OSError as error:
        raise MasterKeyResolveError(str(error)) from error

    if result.returncode == 0:
        try:
            value = result.stdout.decode("utf-8").strip()
        except UnicodeDecodeError as error:
            raise MasterKeyResolveError("keychain output is not valid UTF-8") from error
        return value or None

    stderr = result.stderr.decode("utf-8", errors="replace").lower()
    if result.returncode == _KEYCHAIN_NOT_FOUND_STATUS or "could not be found" in stderr:
        return None

    raise MasterKeyResolveError(
        "security find-generic-password failed "
        f"(service={service}, account={account}, status={result.returncode}): "
        f"{stderr.strip()}"
    )


def resolve_master_key() -> ResolvedMasterKey | None:
    """Find the master key in the environment, then the macOS keychain.

    Returns None when no key is configured anywhere.
    """
    value = _read_non_empty_env(MASTER_KEY_ENV)
    if value is not None:
        return ResolvedMasterKey(value, MasterKeySource.ENVIRONMENT)

    value = _read_keychain()
    if value is not None:
        return ResolvedMasterKey(value, MasterKeySource.KEYCHAIN)
    return None