"""
Finance Tracker Backend — Application Package Initializer
==========================================================

What: REST API for recording income and expense transactions.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   TransactionService (Handler)      │  ← Store calls + error mapping
    ├─────────────────────────────────────┤
    │   TransactionStore (Store client)   │  ← find / insert / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The service receives its store through dependency injection, so it can be
    exercised against any TransactionStore implementation.
"""

__version__ = "1.0.0"
