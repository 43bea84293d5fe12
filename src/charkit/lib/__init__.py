"""
# charkit Core Library

This package contains the core building blocks of charkit: the `CharSet`
value type, the predefined character sets, and the configuration and
logging infrastructure that the CLI depends on.
"""
