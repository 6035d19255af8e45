"""v1 router package: all /api/v1/* endpoints live here.

Files:
  members.py  - REFERENCE router pattern (copy when adding items, deliveries, etc.)
  orders.py   - Order search, lookup, placement and cancellation

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to jpashop/services/.
"""
