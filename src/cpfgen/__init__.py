"""cpfgen: generate valid Brazilian CPF numbers from the command line."""

__version__ = "0.1.0"
