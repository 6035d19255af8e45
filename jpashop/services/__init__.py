"""Services package: all business logic lives here, never in routers.

Files:
  member.py  - REFERENCE service pattern (copy when adding Item, Delivery, etc.)
  order.py   - Placing, searching and cancelling orders

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
