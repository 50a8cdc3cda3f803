"""Domain layer for equiledger application.

Services are imported from their modules (equiledger.domain.sale, ...) so that
the database layer can import domain entities without a cycle.
"""
