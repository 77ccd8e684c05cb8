"""
Core calendar arithmetic, domain models, and contracts.

This package contains the conversion engine that is independent of
string parsing and formatting (see jalcal.bridge).
"""
