"""Pydantic schemas package.

Folder intent:
  common.py  - CamelModel base + HealthResponse (all schemas inherit CamelModel)
  member.py  - REFERENCE pattern (copy when adding Item, Delivery, etc.)
  order.py   - Order request DTOs and response models
"""
