"""Test package for Box Connect.

Engine tests are pure Python and drive time through a fake clock. The UI
smoke tests run headlessly using pygame's dummy video driver to avoid opening
real windows. To run these tests, execute ``pytest`` from the project root.
"""
