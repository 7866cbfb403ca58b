"""
Fluent builders for control curves.

A builder collects parameters through chained ``with_*`` calls and produces
one immutable curve from ``build()``. Setters never validate; all checking
happens in ``build()``, which either returns a fully valid curve or raises
ConfigurationError. A failed build leaves the builder usable, so a caller can
correct the offending value and try again.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .config import CurveConfig, PowerCurveConfig
from .curves import ControlCurve, LinearCurve, PowerCurve


class CurveBuilder(ABC):
    """
    Base builder holding the parameters shared by every curve.

    Subclasses implement ``_post_build`` to run variant-specific validation
    and construct the curve, and may extend ``_make_config`` with extra
    fields.
    """

    def __init__(self):
        self.minimum_power = 0.0
        self.dead_zone = 0.0
        self.power_multiplier = 1.0

    def with_minimum_power(self, minimum_power: float):
        """
        Set the minimum power, the least output needed to make the motor move.

        Parameters
        ----------
        minimum_power : float
            Should be in the range [0, 1).

        Returns
        -------
        self, for chaining
        """
        self.minimum_power = minimum_power
        return self

    def with_dead_zone(self, dead_zone: float):
        """
        Set the dead zone. Inputs with smaller magnitude are treated as 0,
        which absorbs the drift most joysticks and controller axes have.

        Parameters
        ----------
        dead_zone : float
            Should be in the range [0, 1).

        Returns
        -------
        self, for chaining
        """
        self.dead_zone = dead_zone
        return self

    def with_power_multiplier(self, power_multiplier: float):
        """
        Set the output magnitude produced at full-scale input.

        Parameters
        ----------
        power_multiplier : float
            Should be in the range (0, 1].

        Returns
        -------
        self, for chaining
        """
        self.power_multiplier = power_multiplier
        return self

    def with_config(self, config: CurveConfig):
        """Copy the shared parameters of an existing config."""
        self.minimum_power = config.minimum_power
        self.dead_zone = config.dead_zone
        self.power_multiplier = config.power_multiplier
        return self

    def _make_config(self) -> CurveConfig:
        return CurveConfig(
            minimum_power=self.minimum_power,
            dead_zone=self.dead_zone,
            power_multiplier=self.power_multiplier,
        )

    @abstractmethod
    def _post_build(self, config) -> ControlCurve:
        """Run variant-specific validation and construct the curve."""

    def build(self) -> ControlCurve:
        """
        Validate the collected parameters and build the curve.

        Returns
        -------
        ControlCurve
            The newly created curve.

        Raises
        ------
        ConfigurationError
            If any parameter is outside its bounds.
        """
        config = self._make_config()
        # Shared fields are checked before variant-specific ones
        CurveConfig.validate(config)
        return self._post_build(config)


class LinearCurveBuilder(CurveBuilder):
    """Builder for LinearCurve."""

    def _post_build(self, config) -> LinearCurve:
        return LinearCurve(config)


class PowerCurveBuilder(CurveBuilder):
    """
    Builder for PowerCurve.

    Parameters
    ----------
    power : int
        Exponent of the curve. Odd powers are recommended.
    """

    def __init__(self, power: int):
        super().__init__()
        self.power = power

    def _make_config(self) -> PowerCurveConfig:
        return PowerCurveConfig(
            minimum_power=self.minimum_power,
            dead_zone=self.dead_zone,
            power_multiplier=self.power_multiplier,
            power=self.power,
        )

    def _post_build(self, config) -> PowerCurve:
        # PowerCurve validates the exponent and issues EvenPowerWarning
        return PowerCurve(config)
