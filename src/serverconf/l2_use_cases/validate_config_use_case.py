"""Use case: structural and cross-field validation of a loaded Config.

Each section declares its rules as a tuple of ``FieldRule``. A rule names the
fields it guards and holds a predicate over the whole section, so rules that
depend on sibling fields need no lookup machinery. Adding a range or
non-empty rule means appending to the tuple; callers keep calling
``validate_config`` / ``check_config``.

All violations are collected in a fixed order: rule declaration order, then
field order within the rule. ``validate_*`` raise one ``ConfigValidationError``
carrying the whole list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from serverconf.l1_entities.config import Config, ServerConfig
from serverconf.l1_entities.errors import ConfigValidationError
from serverconf.l1_entities.violation import Violation

log = logging.getLogger('serverconf.validator')

SectionT = TypeVar('SectionT', bound=BaseModel)


@dataclass(frozen=True)
class FieldRule(Generic[SectionT]):
    """A named check guarding one or more fields of a config section.

    ``check`` receives the section and a field name, and returns True when that
    field satisfies the rule.
    """

    name: str
    fields: tuple[str, ...]
    check: Callable[[SectionT, str], bool]
    message: str

    def violations(self, section: SectionT, prefix: str) -> list[Violation]:
        return [
            Violation(location=_location(section, prefix, field), rule=self.name, message=self.message)
            for field in self.fields
            if not self.check(section, field)
        ]


def _location(section: BaseModel, prefix: str, field: str) -> str:
    """Dotted file-key path for *field*, using the alias the file format uses."""
    alias = type(section).model_fields[field].alias or field
    return f'{prefix}.{alias}' if prefix else alias


def _tls_required(server: ServerConfig, field: str) -> bool:
    if not server.enable_tls:
        return True
    return getattr(server, field) != ''


SERVER_RULES: tuple[FieldRule[ServerConfig], ...] = (
    FieldRule(
        name='tls_required',
        fields=('secret_key_path', 'certificate_path'),
        check=_tls_required,
        message='required when enable_tls is true',
    ),
)


def check_server_config(server: ServerConfig, *, prefix: str = '') -> list[Violation]:
    """Return every violated server rule; empty when the section is valid."""
    violations: list[Violation] = []
    for rule in SERVER_RULES:
        violations.extend(rule.violations(server, prefix))
    return violations


def check_config(config: Config) -> list[Violation]:
    """Validate every nested section and return the combined violations."""
    return check_server_config(config.server, prefix='server')


def validate_server_config(server: ServerConfig) -> None:
    """Raise ConfigValidationError if *server* breaks any rule."""
    _raise_if_any(check_server_config(server))


def validate_config(config: Config) -> None:
    """Raise ConfigValidationError if any section of *config* breaks a rule."""
    _raise_if_any(check_config(config))


def _raise_if_any(violations: list[Violation]) -> None:
    if not violations:
        return
    for violation in violations:
        log.warning('config rule failed: %s', violation)
    raise ConfigValidationError(violations)
