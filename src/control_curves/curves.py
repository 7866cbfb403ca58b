"""
Control Curves
==============

Shaping functions that map a normalized input axis (typically a joystick in
[-1, 1]) to a normalized actuator command.

Every curve composes the same three stages around a shape-specific function:

1. Dead zone: inputs with magnitude below ``dead_zone`` (and exactly 0) map
   to 0.
2. Normalization: the remaining magnitude is rescaled so that the dead-zone
   edge becomes 0 and full-scale input becomes 1.
3. Output span: the shaped fraction is mapped onto
   [minimum_power, power_multiplier] and the input's sign is restored.

With ``s`` the shaped fraction, the output magnitude is

    minimum_power * (1 - s) + power_multiplier * s

which equals ``minimum_power + (power_multiplier - minimum_power) * s`` and is
exact at both anchors, so ``get(dead_zone) == minimum_power`` and
``get(1) == power_multiplier`` hold without rounding error.

Available Curves:
-----------------
- LinearCurve: s = f, a straight ramp from the dead-zone edge to full scale
- PowerCurve:  s = f**power, finer resolution near the center
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from .config import CurveConfig, PowerCurveConfig


class ControlCurve(ABC):
    """
    Base class for all control curves.

    Subclasses implement ``_raw``, the shape on the dead-zone-normalized
    magnitude. ``_raw`` must satisfy ``_raw(0) == 0`` and ``_raw(1) == 1`` and
    must not apply the dead zone, minimum power or multiplier itself.

    Instances are immutable and ``get`` is a pure function of the input, so a
    single curve may be evaluated from any number of threads at once.

    Parameters
    ----------
    config : CurveConfig
        Curve parameters. Validated on construction.

    Raises
    ------
    ConfigurationError
        If any parameter is outside its domain.
    """

    __slots__ = ("_config",)

    config_type = CurveConfig

    def __init__(self, config: CurveConfig):
        if not isinstance(config, self.config_type):
            raise TypeError(
                f"{type(self).__name__} requires a {self.config_type.__name__}, "
                f"got {type(config).__name__}"
            )
        config.validate()
        self._config = config

    @property
    def config(self) -> CurveConfig:
        return self._config

    @property
    def minimum_power(self) -> float:
        """Output magnitude just past the dead zone."""
        return self._config.minimum_power

    @property
    def dead_zone(self) -> float:
        """Input magnitude below which the output is 0."""
        return self._config.dead_zone

    @property
    def power_multiplier(self) -> float:
        """Output magnitude at full-scale input."""
        return self._config.power_multiplier

    @abstractmethod
    def _raw(self, fraction):
        """
        Shape the dead-zone-normalized magnitude.

        Parameters
        ----------
        fraction : float or ndarray
            0 at the dead-zone edge, 1 at full scale. Values above 1 come
            from inputs beyond full scale and are extrapolated.

        Returns
        -------
        float or ndarray
            Shaped fraction, same type as the input.
        """

    def get(self, value: float) -> float:
        """
        Shape a single input value.

        Inputs outside [-1, 1] are extrapolated by the shape, not clamped.
        Once the extrapolated value leaves the float range the result is
        signed infinity; ``get`` never raises for a finite input.

        Parameters
        ----------
        value : float
            Raw input, usually a joystick or controller axis reading.

        Returns
        -------
        float
            Shaped output, ready to feed to a motor controller.

        Examples
        --------
        >>> curve = LinearCurve(CurveConfig(dead_zone=0.1, minimum_power=0.2))
        >>> curve.get(0.05)
        0.0
        >>> curve.get(-0.1)
        -0.2
        """
        config = self._config
        magnitude = abs(value)
        if magnitude == 0 or magnitude < config.dead_zone:
            return 0.0

        fraction = (magnitude - config.dead_zone) / (1.0 - config.dead_zone)
        try:
            shaped = self._raw(fraction)
        except OverflowError:
            shaped = math.inf

        if math.isinf(shaped):
            output = self._overflow_limit()
        else:
            output = config.minimum_power * (1.0 - shaped) + config.power_multiplier * shaped
        return output if value > 0 else -output

    def _overflow_limit(self) -> float:
        """Output for a positive input once the shaped fraction exceeds the float range."""
        config = self._config
        span = config.power_multiplier - config.minimum_power
        if span == 0:
            return config.minimum_power
        return math.copysign(math.inf, span)

    def __call__(self, value: float) -> float:
        return self.get(value)

    def evaluate(self, values) -> np.ndarray:
        """
        Vectorized ``get`` over an array of inputs.

        Parameters
        ----------
        values : array_like
            Input values of any shape.

        Returns
        -------
        ndarray
            Shaped outputs with the same shape as ``values``.
        """
        config = self._config
        x = np.asarray(values, dtype=float)
        magnitude = np.abs(x)
        active = (magnitude != 0) & (magnitude >= config.dead_zone)

        # Overflowed entries produce inf or nan here and are replaced below
        with np.errstate(over='ignore', invalid='ignore'):
            # Inactive entries are computed on a zero fraction and discarded below
            fraction = np.where(
                active, (magnitude - config.dead_zone) / (1.0 - config.dead_zone), 0.0
            )
            shaped = self._raw(fraction)
            output = config.minimum_power * (1.0 - shaped) + config.power_multiplier * shaped

        output = np.where(np.isinf(shaped), self._overflow_limit(), output)
        return np.where(active, np.where(x < 0, -output, output), 0.0)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._config == other._config

    def __hash__(self):
        return hash((type(self), self._config))

    def __repr__(self):
        config = self._config
        return (
            f"{type(self).__name__}(minimum_power={config.minimum_power}, "
            f"dead_zone={config.dead_zone}, "
            f"power_multiplier={config.power_multiplier}{self._repr_extra()})"
        )

    def _repr_extra(self) -> str:
        return ""


class LinearCurve(ControlCurve):
    """
    Linear control curve.

    A straight ramp from ``minimum_power`` at the dead-zone edge to
    ``power_multiplier`` at full scale:

        get(v) = sign(v) * (minimum_power
                 + (power_multiplier - minimum_power) * (|v| - dead_zone) / (1 - dead_zone))
    """

    __slots__ = ()

    def _raw(self, fraction):
        return fraction


class PowerCurve(ControlCurve):
    """
    Power-law control curve, anchored at the dead-zone edge.

        get(v) = sign(v) * (minimum_power
                 + (power_multiplier - minimum_power) / (1 - dead_zone)**power
                 * (|v| - dead_zone)**power)

    Larger powers flatten the response near the center and steepen it near
    full scale. The shape is applied to the magnitude, so the curve is odd
    symmetric for any power; odd powers are still the recommended choice and
    even powers raise EvenPowerWarning on construction.

    Examples
    --------
    >>> curve = PowerCurve(PowerCurveConfig(power=3))
    >>> round(curve.get(0.5), 6)
    0.125
    """

    __slots__ = ()

    config_type = PowerCurveConfig

    @property
    def power(self) -> int:
        return self._config.power

    def _raw(self, fraction):
        return fraction ** self._config.power

    def _repr_extra(self) -> str:
        return f", power={self._config.power}"
