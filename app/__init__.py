"""
Campus Records API - Application Package
=========================================

What: REST backend for the course-management demo (menu items,
      organizations, recommendation requests, help requests, articles).

Layers:

    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  ← HTTP + role guards
    ├─────────────────────────────────────┤
    │        Services                     │  ← not-found / DB error mapping
    ├─────────────────────────────────────┤
    │        Repositories                 │  ← one per entity
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (Persistence)            │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
