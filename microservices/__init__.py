"""
Checkout microservices

- pricing_service: order total calculation
- shipping_service: shipping quote lookup
"""
