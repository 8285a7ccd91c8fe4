# planeview/core/__init__.py
"""Numerical core: vector math and plane geometry."""
