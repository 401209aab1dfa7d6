# Routes package init
"""
Finance Tracker Backend — API Routes Package
==============================================

Route Inventory:
    - transactions.py:  GET    /api/transactions        (list, newest first)
                        POST   /api/transactions        (create)
                        PUT    /api/transactions/{id}   (partial update)
                        DELETE /api/transactions/{id}   (delete)
    - health.py:        GET    /health                  (service health check)

Routes stay thin: they extract request data, call TransactionService and
return its result. Error formatting lives in the global exception handlers.
"""
