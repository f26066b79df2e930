"""Design rule checking and input validation for fluidstate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def summary(self) -> str:
        """One line per finding, errors first."""
        ordered = self.errors + self.warnings + [
            m for m in self.messages if m.severity == Severity.INFO
        ]
        return "\n".join(f"[{m.severity.value}] {m.parameter}: {m.message}" for m in ordered)


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value, limit=0.0)


def validate_non_negative(name: str, value: float, result: ValidationResult) -> None:
    if value < 0:
        result.error(name, f"{name} must not be negative, got {value}", value=value, limit=0.0)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        result.add(
            severity,
            name,
            f"{name} = {value} is outside [{low}, {high}]",
            value=value,
            limit=(low, high),
        )


def validate_refrigeration_cycle(definition: Any) -> ValidationResult:
    """Run validation checks on a refrigeration cycle definition.

    Args:
        definition: Object exposing ``evaporating_temperature``,
            ``condensing_temperature``, ``superheat``, ``subcooling`` and
            ``isentropic_efficiency`` (temperatures in K, differences in K,
            efficiency as a decimal fraction).

    Returns:
        ValidationResult with errors for physically impossible inputs and
        warnings for unusual ones.
    """
    result = ValidationResult()

    t_evap = definition.evaporating_temperature
    t_cond = definition.condensing_temperature
    validate_positive("evaporating_temperature", t_evap, result)
    validate_positive("condensing_temperature", t_cond, result)
    if t_cond <= t_evap:
        result.error(
            "condensing_temperature",
            "Condensing temperature must be higher than evaporating temperature",
            value=t_cond,
            limit=t_evap,
        )
    elif t_cond - t_evap > 80.0:
        result.warning(
            "condensing_temperature",
            f"Temperature lift {t_cond - t_evap:.1f} K is unusually large",
        )

    validate_non_negative("superheat", definition.superheat, result)
    validate_non_negative("subcooling", definition.subcooling, result)
    if definition.superheat > 30.0:
        result.warning("superheat", f"Superheat {definition.superheat:.1f} K is very high")
    if definition.subcooling > 20.0:
        result.warning("subcooling", f"Subcooling {definition.subcooling:.1f} K is very high")

    eta = definition.isentropic_efficiency
    if eta <= 0.0 or eta >= 1.0:
        result.error(
            "isentropic_efficiency",
            f"Isentropic efficiency must be in (0, 1), got {eta}",
            value=eta,
            limit=(0.0, 1.0),
        )
    else:
        validate_range("isentropic_efficiency", eta, 0.4, 0.95, result, Severity.WARNING)

    return result
