"""
Built-in control curves and convenience constructors.

Use ``simple_linear()`` / ``simple_power()`` when the defaults (no dead zone,
no minimum power, full-scale output) are fine, and ``linear()`` / ``power()``
to get a builder for custom values. ``build_curve()`` builds a curve from a
name and keyword parameters, which suits curves picked from a settings file.
"""

from __future__ import annotations

from .builders import CurveBuilder, LinearCurveBuilder, PowerCurveBuilder
from .config import ConfigurationError
from .curves import ControlCurve, LinearCurve, PowerCurve


def simple_linear() -> LinearCurve:
    """
    Linear curve with no dead zone and no minimum power.

    Use ``linear()`` to set custom values.
    """
    return linear().build()


def simple_power(power: int) -> PowerCurve:
    """
    Power curve with no dead zone and no minimum power.

    Parameters
    ----------
    power : int
        Exponent. For best results use an odd power.

    Examples
    --------
    >>> curve = simple_power(3)
    >>> round(curve.get(0.8), 6)
    0.512
    """
    return PowerCurveBuilder(power).build()


def linear() -> LinearCurveBuilder:
    """Builder for a linear curve with custom dead zone and power values."""
    return LinearCurveBuilder()


def power(power: int) -> PowerCurveBuilder:
    """
    Builder for a power curve with custom dead zone and power values.

    Parameters
    ----------
    power : int
        Exponent. In most cases this should be odd.
    """
    return PowerCurveBuilder(power)


# Name -> (builder factory, names of the extra arguments the factory takes)
CURVE_TYPES = {
    'linear': (linear, ()),
    'power': (power, ('power',)),
}


def build_curve(kind: str,
                minimum_power: float = 0.0,
                dead_zone: float = 0.0,
                power_multiplier: float = 1.0,
                **kwargs) -> ControlCurve:
    """
    Build a curve of a registered kind.

    Parameters
    ----------
    kind : str
        Curve family, 'linear' or 'power' (case insensitive).
    minimum_power, dead_zone, power_multiplier : float
        Shared curve parameters.
    **kwargs
        Family-specific arguments, e.g. ``power`` for a power curve.

    Returns
    -------
    ControlCurve
        The built curve.

    Raises
    ------
    ValueError
        If ``kind`` is not registered.
    ConfigurationError
        If a family argument is missing or unexpected, or any parameter is
        out of bounds.

    Examples
    --------
    >>> curve = build_curve('power', power=5, dead_zone=0.05, minimum_power=0.12)
    """
    key = kind.lower()
    if key not in CURVE_TYPES:
        raise ValueError(f"Unknown curve kind: {kind}. Use one of {sorted(CURVE_TYPES)}")

    factory, arg_names = CURVE_TYPES[key]
    unexpected = sorted(set(kwargs) - set(arg_names))
    if unexpected:
        raise ConfigurationError(unexpected[0], kwargs[unexpected[0]],
                                 f"one of {list(arg_names)} for a {key} curve")
    missing = [name for name in arg_names if name not in kwargs]
    if missing:
        raise ConfigurationError(missing[0], None, f"given for a {key} curve")

    builder: CurveBuilder = factory(*(kwargs[name] for name in arg_names))
    return (builder
            .with_minimum_power(minimum_power)
            .with_dead_zone(dead_zone)
            .with_power_multiplier(power_multiplier)
            .build())


def get_curve_info():
    """
    Return a dictionary describing the registered curve families.

    Examples
    --------
    >>> info = get_curve_info()
    >>> for name, details in info.items():
    ...     print(f"{name}: {details['description']}")
    linear: Straight ramp from the dead-zone edge to full scale
    power: Power law, finer control near center
    """
    return {
        'linear': {
            'name': 'Linear',
            'description': 'Straight ramp from the dead-zone edge to full scale',
            'parameters': ['minimum_power', 'dead_zone', 'power_multiplier']
        },
        'power': {
            'name': 'Power',
            'description': 'Power law, finer control near center',
            'parameters': ['minimum_power', 'dead_zone', 'power_multiplier', 'power']
        }
    }
