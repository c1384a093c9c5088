"""
Global constants used throughout the project
"""
from pathlib import Path


# Text corpora (e.g. tinyTale.txt) shipped with the repository
DATA = Path(__file__).parent / "resources"
DEBUG = False

# Words shorter than this are ignored by the frequency counter
MIN_LENGTH = 1

# Table implementations selectable from the command line
TABLES = ("bst", "rbt")
DEFAULT_TABLE = "rbt"
