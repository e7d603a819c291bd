"""Parcel delivery depot simulation: parcels, zones, vans and delivery queues."""

__version__ = "0.1.0"
__all__ = ["package", "stack", "queue", "simulation"]