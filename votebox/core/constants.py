"""Application constants.

This module contains the file names, poll categories and sizes used throughout
the application. Centralizing these values makes them easier to maintain.
"""
from typing import NamedTuple


class Category(NamedTuple):
    """Files and poll title belonging to one option flavor."""

    name: str
    poll_title: str
    definitions_file: str
    results_file: str


# Option categories
# Each seeded poll offers exactly one flavor of option. The poll title in
# polls.txt decides which category the poll is stored with.
BAND = "band"
WEBSITE = "website"

CATEGORIES = (
    Category(BAND, "Glasanje za omiljeni bend", "bands-definition.txt", "bands-results.txt"),
    Category(WEBSITE, "Glasanje za omiljenu web stranicu", "websites-definition.txt", "websites-results.txt"),
)

POLLS_FILE = "polls.txt"
DB_SETTINGS_FILE = "dbsettings.properties"

# Keys every database properties file must define
DB_PROPERTIES = ("host", "port", "name", "user", "password")

# Column sizes of the seeded tables
POLL_TITLE_LENGTH = 150
POLL_MESSAGE_LENGTH = 2048
OPTION_TITLE_LENGTH = 100
OPTION_LINK_LENGTH = 150

# Spreadsheet export
XLS_FILENAME = "vote_results.xlsx"
XLS_SHEET_NAME = "results"
XLS_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
