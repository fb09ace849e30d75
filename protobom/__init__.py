"""A format-neutral graph model for Software Bills of Materials."""

__version__ = "0.1.0"