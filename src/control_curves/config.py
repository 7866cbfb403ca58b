"""
Curve Configuration
===================

Immutable parameter records shared by every control curve, together with the
exception and warning types raised while validating them.

A configuration is checked once, when a curve is built, and is then owned by
that curve for its whole lifetime. Nothing in this module mutates a config
after construction.

Parameter domains:
------------------
- minimum_power    : [0, 1)   smallest output magnitude past the dead zone
- dead_zone        : [0, 1)   inputs with smaller magnitude produce 0
- power_multiplier : (0, 1]   output magnitude at full-scale input
- power            : int >= 1 exponent of a power curve (odd recommended)
"""

from __future__ import annotations

import inspect
import numbers
import os
import warnings
from dataclasses import dataclass, fields
from typing import Any, Mapping


class ConfigurationError(ValueError):
    """
    Raised when a curve parameter falls outside its valid domain.

    Attributes
    ----------
    field : str
        Name of the offending parameter.
    value : object
        The rejected value.
    bound : str
        Human readable description of the violated bound.
    """

    def __init__(self, field: str, value: Any, bound: str):
        self.field = field
        self.value = value
        self.bound = bound
        super().__init__(f"{field} must be {bound}, got {value!r}")


class EvenPowerWarning(UserWarning):
    """Issued when a power curve is built with an even exponent."""


_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def _external_stacklevel() -> int:
    """
    Stack level of the first frame outside this package, for warnings.warn
    called by the function that calls this helper.
    """
    frame = inspect.currentframe().f_back
    level = 1
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


def _check_real(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(name, value, "a real number")


def _check_unit_interval(name: str, value: float) -> None:
    _check_real(name, value)
    # NaN fails both comparisons, so it is rejected here too
    if not 0.0 <= value < 1.0:
        raise ConfigurationError(name, value, "in the range [0, 1)")


@dataclass(frozen=True)
class CurveConfig:
    """Parameters shared by all curve shapes."""
    minimum_power: float = 0.0
    dead_zone: float = 0.0
    power_multiplier: float = 1.0

    def validate(self) -> None:
        """
        Check every field against its domain.

        Raises
        ------
        ConfigurationError
            On the first field found outside its bounds.
        """
        _check_unit_interval("minimum_power", self.minimum_power)
        _check_unit_interval("dead_zone", self.dead_zone)
        _check_real("power_multiplier", self.power_multiplier)
        if not 0.0 < self.power_multiplier <= 1.0:
            raise ConfigurationError(
                "power_multiplier", self.power_multiplier, "in the range (0, 1]"
            )

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]):
        """
        Build a config from a plain mapping, such as a parsed settings file.

        Missing keys take their defaults. Unknown keys raise
        ConfigurationError rather than being silently dropped. The result is
        not validated; call validate() or hand it to a builder.

        Examples
        --------
        >>> CurveConfig.from_dict({"dead_zone": 0.05, "minimum_power": 0.1})
        CurveConfig(minimum_power=0.1, dead_zone=0.05, power_multiplier=1.0)
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(
                unknown[0], values[unknown[0]], f"one of {sorted(known)}"
            )
        return cls(**dict(values))


@dataclass(frozen=True)
class PowerCurveConfig(CurveConfig):
    """Shared parameters plus the integer exponent of a power curve."""
    power: int = 1

    def __post_init__(self):
        # Accept NumPy integer scalars but store a plain int
        if isinstance(self.power, numbers.Integral) and not isinstance(self.power, bool):
            object.__setattr__(self, "power", int(self.power))

    def validate(self) -> None:
        """
        Check the shared fields, then the exponent.

        An even exponent is accepted but reported with EvenPowerWarning.
        """
        super().validate()
        power = self.power
        if isinstance(power, bool) or not isinstance(power, numbers.Integral):
            raise ConfigurationError("power", power, "an integer")
        if power < 1:
            raise ConfigurationError("power", power, "at least 1")
        if power % 2 == 0:
            warnings.warn(
                f"power={power} is even; odd powers are recommended for drive curves",
                EvenPowerWarning,
                stacklevel=_external_stacklevel(),
            )
