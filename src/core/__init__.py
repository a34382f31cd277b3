"""
Core arithmetic engine and contracts.

This package contains the arbitrary-precision decimal number types and the
contracts for their textual forms. It has no I/O and no external systems.
"""
