"""
AxionJS registry resolution and code generation service
"""

__version__ = "1.0.1"
