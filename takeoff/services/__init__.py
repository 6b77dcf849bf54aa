"""Takeoff services: extraction, classification, pricing, quantities and reporting."""
