# Routes package init
"""
Roster Backend — API Routes Package
====================================

Route Inventory:
    - students.py:  GET /student/{student}/detail            (bound by id)
                    GET /student/by-number/{student}/detail  (bound by number)
    - health.py:    GET /health                              (service health check)
    - binding.py:   Route model binding (descriptor, registry, bind())

Design Principle:
    Routes are THIN. Entity lookup and the not-found response happen in
    the binding dependency before the handler is called.
"""
