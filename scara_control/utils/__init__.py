"""
Shared constants and helper utilities.

Centralizes the default calibration values of the arm and the small
stateless angle/rounding helpers used across the scara_control package.
"""
