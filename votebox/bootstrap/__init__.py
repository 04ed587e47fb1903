"""Startup loading of definition files and seeding of the database."""
from votebox.bootstrap.definitions import Definitions, load_definitions
from votebox.bootstrap.registry import PollRegistry
from votebox.bootstrap.schema import initialize_schema

__all__ = ["Definitions", "PollRegistry", "initialize_schema", "load_definitions"]
