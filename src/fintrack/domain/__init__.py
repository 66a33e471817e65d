"""Domain layer for fintrack application.

Services live in their own modules (``fintrack.domain.recurrence`` and so on)
and are imported from there; the database layer imports ``entities`` and
``errors`` from this package, so nothing is re-exported here.
"""
