"""Glue services for the EQ-5D-5L TTO survey platform."""

__version__ = "0.1.0"
