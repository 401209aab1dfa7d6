# Services package init
"""
Finance Tracker Backend — Services Layer
==========================================

What:  Business logic layer sitting between routes (HTTP) and the store.

Service Inventory:
    - TransactionStore (abstract): Contract for the transaction collection
    - SQLTransactionStore: Concrete store over async SQLAlchemy
    - TransactionService: List / create / update / delete with error mapping
"""
