"""Domain layer for supplyledger application.

Services are imported from their modules directly (``supplyledger.domain.supplier``
etc.) so that the database layer can import ``entities`` and ``errors`` without
pulling the services in.
"""
