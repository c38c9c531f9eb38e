"""
API Module
---------
Provides RESTful API endpoints using FastAPI.
Features include:
- Looking up a Dutch address from postcode and house number
- Place name search with a local fallback
- Triggering the batch geocoding job (bearer token protected)
"""
