"""Genesis state and chain specification builder for the Sunshine ledger."""

__version__ = "0.1.0"
