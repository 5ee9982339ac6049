"""
Persons: carpool members (car owners, drivers and passengers).
"""
