"""
Commutes: one dated trip with its cars, passengers, drivers and per-person price.
"""
