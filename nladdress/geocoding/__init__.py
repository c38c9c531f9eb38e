"""
Geocoding Module
--------------
Handles forward geocoding of stored addresses to coordinates.
Uses OpenCage or OpenStreetMap's Nominatim API with a fixed delay between calls to stay within rate limits.
"""
