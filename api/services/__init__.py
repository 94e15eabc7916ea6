"""
High-level use cases for the Personas API.

Each service module orchestrates repositories/adapters to implement business
rules (persona CRUD, email deliverability check).

Routers (FastAPI endpoints) call these services instead of opening database
sessions or HTTP clients directly.
"""
