"""PharmaLink: medication request broadcast between customers and nearby pharmacies."""

__version__ = "0.1.0"
