"""
FameEX API Integration

Provides modular API pieces for the FameEX spot REST API:
- Authentication (HMAC-SHA256 signing)
- Response classification
- Account balance queries
- Order placement and management
- Currency metadata
"""
