"""Command line interface for supplyledger."""
