"""autoerror — derive Display, Error and From boilerplate for error enums."""

__version__ = "0.1.0"
