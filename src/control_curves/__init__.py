"""
Control Curve Library for Joystick and Axis Input Shaping

Shaping functions that turn a normalized controller axis into an actuator
command, giving finer control near center without giving up full-scale
output. Each curve supports a dead zone to absorb stick drift, a minimum
power so small deflections still move the mechanism, and a power multiplier
to cap the output at full deflection.
"""

from .config import (
    CurveConfig,
    PowerCurveConfig,
    ConfigurationError,
    EvenPowerWarning,
)
from .curves import ControlCurve, LinearCurve, PowerCurve
from .builders import CurveBuilder, LinearCurveBuilder, PowerCurveBuilder
from .factory import (
    simple_linear, simple_power,
    linear, power,
    build_curve,
    get_curve_info,
    CURVE_TYPES,
)
from .plotting import sample_curve, plot_curves

__version__ = "0.1.0"
__author__ = "Jomin Joseph Karukakalam"

__all__ = [
    'CurveConfig',
    'PowerCurveConfig',
    'ConfigurationError',
    'EvenPowerWarning',
    'ControlCurve',
    'LinearCurve',
    'PowerCurve',
    'CurveBuilder',
    'LinearCurveBuilder',
    'PowerCurveBuilder',
    'simple_linear',
    'simple_power',
    'linear',
    'power',
    'build_curve',
    'get_curve_info',
    'CURVE_TYPES',
    'sample_curve',
    'plot_curves',
]
