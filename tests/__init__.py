"""Test package for the analog clock.

Core modules (time values, sampling, geometry, face) are tested as plain
Python. Tests that touch the pygame shell run headlessly using pygame's dummy
video driver. To run these tests, execute ``pytest`` from the project root.
"""
