"""JPA Shop API: members and orders over async SQLAlchemy."""
