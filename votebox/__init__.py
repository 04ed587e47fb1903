"""Votebox: band and website polls backed by a relational database."""

__version__ = "1.0.0"
