"""medea: a command-line developer's toolbox."""

__version__ = "0.6.1"
