"""
Credential Form Domain Model - Field values and synchronous validation.

Pure state holder: no network or storage access.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Sequence, Set, Tuple

from auth_front.domain.credential import Credentials


IDENTIFIER = "identifier"
SECRET = "secret"


class ViolationKind(Enum):
    """Local validation failures on a single field."""
    MISSING_REQUIRED = "missing_required"
    TOO_SHORT = "too_short"


@dataclass(frozen=True)
class FieldRule:
    """
    Declarative constraint on one field.

    Domain rules:
    - min_length >= 0
    - An empty value is "missing" for a required field and, when
      min_length > 0, also too short
    """
    required: bool = False
    min_length: int = 0

    def __post_init__(self):
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")

    def check(self, value: str) -> Set[ViolationKind]:
        """Return the violations of this rule for a value."""
        violations = set()
        if self.required and value == "":
            violations.add(ViolationKind.MISSING_REQUIRED)
        if len(value) < self.min_length:
            violations.add(ViolationKind.TOO_SHORT)
        return violations


# Rule set for the login form. Swappable: pass another mapping to CredentialForm.
DEFAULT_RULES: Dict[str, Tuple[FieldRule, ...]] = {
    IDENTIFIER: (FieldRule(required=True, min_length=6),),
    SECRET: (FieldRule(required=True, min_length=6),),
}


@dataclass
class FieldState:
    """Per-field state: current value, interaction flag and violations."""
    value: str = ""
    touched: bool = False
    errors: Set[ViolationKind] = field(default_factory=set)


class CredentialForm:
    """
    Login form with two fields (identifier, secret).

    Violations are always computed, but only surfaced through
    visible_violations() once the field was touched or the form
    was submitted once.
    """

    def __init__(self, rules: Optional[Mapping[str, Sequence[FieldRule]]] = None):
        """
        Initialize form.

        Args:
            rules: Field name -> rules. Defaults to DEFAULT_RULES.
                   Fields missing from the mapping have no rules.
        """
        self._rules = dict(DEFAULT_RULES if rules is None else rules)
        self._fields: Dict[str, FieldState] = {
            IDENTIFIER: FieldState(),
            SECRET: FieldState(),
        }
        self.submitted_once = False

        for name in self._fields:
            self._revalidate(name)

    def set_value(self, name: str, value: str, touch: bool = True) -> None:
        """
        Update a field's value and recompute its violations.

        Args:
            name: Field name (identifier or secret)
            value: New value
            touch: Mark the field as interacted with (default True)
        """
        state = self._field(name)
        state.value = value
        if touch:
            state.touched = True
        self._revalidate(name)

    def touch(self, name: str) -> None:
        """Mark a field as interacted with without changing it."""
        self._field(name).touched = True

    def value(self, name: str) -> str:
        """Current value of a field."""
        return self._field(name).value

    def is_touched(self, name: str) -> bool:
        return self._field(name).touched

    def field_violations(self, name: str) -> Set[ViolationKind]:
        """All current violations of a field, regardless of display gating."""
        return set(self._field(name).errors)

    def visible_violations(self, name: str) -> Set[ViolationKind]:
        """Violations the view should show right now."""
        state = self._field(name)
        if state.touched or self.submitted_once:
            return set(state.errors)
        return set()

    def is_valid(self) -> bool:
        """True iff every field's violation set is empty."""
        return all(not state.errors for state in self._fields.values())

    def mark_submitted(self) -> None:
        """Record a submit attempt; lets hidden violations surface."""
        self.submitted_once = True

    def snapshot(self) -> Credentials:
        """Copy the current values into an immutable Credentials."""
        return Credentials(
            identifier=self._fields[IDENTIFIER].value,
            secret=self._fields[SECRET].value,
        )

    def discard_secret(self) -> None:
        """Forget the secret once it has been transmitted."""
        self.set_value(SECRET, "", touch=False)

    def reset(self) -> None:
        """Clear all values and interaction flags."""
        for name, state in self._fields.items():
            state.value = ""
            state.touched = False
            self._revalidate(name)
        self.submitted_once = False

    def _field(self, name: str) -> FieldState:
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(f"Unknown form field: {name}") from None

    def _revalidate(self, name: str) -> None:
        state = self._fields[name]
        errors = set()
        for rule in self._rules.get(name, ()):
            errors |= rule.check(state.value)
        state.errors = errors
