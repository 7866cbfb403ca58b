"""
Basic Usage Examples for the Control Curve Library

This script demonstrates common use cases for the control curve library.
"""

import warnings

import numpy as np
import matplotlib.pyplot as plt
from control_curves import (
    simple_linear, simple_power,
    linear, power,
    build_curve,
    plot_curves,
    EvenPowerWarning,
    ConfigurationError,
)


def example_1_simple_curves():
    """Example 1: Default linear and cubic curves"""
    print("="*60)
    print("Example 1: Simple Curves")
    print("="*60)

    lin = simple_linear()
    cubic = simple_power(3)

    print(f"\n{'Input':<10} {'Linear':<10} {'Cubic':<10}")
    print("-"*30)
    for x in [-1.0, -0.5, -0.1, 0.0, 0.1, 0.5, 1.0]:
        print(f"{x:<10.2f} {lin.get(x):<10.4f} {cubic.get(x):<10.4f}")


def example_2_tuned_drive_curve():
    """Example 2: Drive curve with dead zone, minimum power and a speed cap"""
    print("\n" + "="*60)
    print("Example 2: Tuned Drive Curve")
    print("="*60)

    drive = (power(5)
             .with_dead_zone(0.05)
             .with_minimum_power(0.12)
             .with_power_multiplier(0.76)
             .build())

    print(f"\n{drive!r}")
    print(f"  Stick drift   get(0.03) = {drive.get(0.03):.4f}")
    print(f"  Dead zone edge get(0.05) = {drive.get(0.05):.4f} (minimum power)")
    print(f"  Half stick    get(0.50) = {drive.get(0.50):.4f}")
    print(f"  Full stick    get(1.00) = {drive.get(1.00):.4f} (power multiplier)")
    print(f"  Full reverse  get(-1.0) = {drive.get(-1.0):.4f}")


def example_3_validation():
    """Example 3: Configuration errors and the even power advisory"""
    print("\n" + "="*60)
    print("Example 3: Validation")
    print("="*60)

    try:
        linear().with_dead_zone(1.0).build()
    except ConfigurationError as err:
        print(f"\nRejected: {err}")

    with warnings.catch_warnings(record=True) as captured:
        warnings.simplefilter("always")
        curve = simple_power(2)
    for w in captured:
        if issubclass(w.category, EvenPowerWarning):
            print(f"Warning: {w.message}")
    print(f"Built anyway: {curve!r}")


def example_4_compare_curves():
    """Example 4: Plot candidate curves side by side"""
    print("\n" + "="*60)
    print("Example 4: Comparing Curves")
    print("="*60)

    curves = [
        simple_linear(),
        simple_power(3),
        build_curve('power', power=5, dead_zone=0.05, minimum_power=0.12,
                    power_multiplier=0.76),
        build_curve('linear', dead_zone=0.1, minimum_power=0.2, power_multiplier=0.8),
    ]
    labels = ['Linear', 'Cubic', 'Power 5, tuned', 'Linear, tuned']

    fig, ax = plot_curves(curves, labels=labels)
    ax.set_xlim([-1, 1])
    ax.set_ylim([-1, 1])

    plt.tight_layout()
    plt.savefig('examples/control_curves.png', dpi=150, bbox_inches='tight')
    print("\n✓ Plot saved to examples/control_curves.png")

    # Resolution near center: output change for a 0.1 stick movement
    x = np.array([0.1, 0.2])
    for curve, label in zip(curves, labels):
        y = curve.evaluate(x)
        print(f"  {label:<16} Δoutput over [0.1, 0.2]: {y[1] - y[0]:.4f}")

    plt.show()


def main():
    """Run all examples"""
    print("\n" + "="*60)
    print("CONTROL CURVE LIBRARY - USAGE EXAMPLES")
    print("="*60)

    example_1_simple_curves()
    example_2_tuned_drive_curve()
    example_3_validation()
    example_4_compare_curves()

    print("\n" + "="*60)
    print("All examples completed successfully! ✓")
    print("="*60)


if __name__ == "__main__":
    main()
