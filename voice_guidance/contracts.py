"""
Contract violation reporting.

Caller mistakes (sentinel maneuvers, malformed distance tables, empty
localization keys, unbound locale) never interrupt voice guidance: they are
logged and the caller receives an empty string. With strict contracts enabled
they raise instead.

Strictness comes from the global config unless a caller scopes its own with
contract_mode, as TurnNotificationTexts does with the config it was built with.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from .config import get_config


logger = logging.getLogger(__name__)

_strict_override: ContextVar[bool | None] = ContextVar("strict_contracts", default=None)


class ContractViolation(Exception):
    """Exception raised for caller contract violations in strict mode."""
    pass


@contextmanager
def contract_mode(strict: bool) -> Iterator[None]:
    """
    Scope contract strictness for the enclosed block.

    Args:
        strict: Raise ContractViolation instead of logging
    """
    token = _strict_override.set(strict)
    try:
        yield
    finally:
        _strict_override.reset(token)


def strict_contracts_enabled() -> bool:
    """Whether contract violations currently raise."""
    override = _strict_override.get()
    if override is None:
        return get_config().strict_contracts
    return override


def contract_violation(message: str, **context: Any) -> None:
    """
    Report a contract violation.

    Args:
        message: What went wrong
        **context: Offending values, appended to the log record
    """
    details = ", ".join(f"{key}={value!r}" for key, value in context.items())
    text = f"{message} ({details})" if details else message

    if strict_contracts_enabled():
        raise ContractViolation(text)

    logger.error(f"Contract violation: {text}")
