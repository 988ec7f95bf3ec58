"""Service layer: evaluates library operations and reports ServiceResult.

Services never print. The CLI (and any other front end) consumes the
ServiceResult they return.
"""
