"""Rendering core: deadline checks, full listing, probability greeting, ports."""
