"""
Cars: vehicles whose round-trip cost is split between commuters.
"""
