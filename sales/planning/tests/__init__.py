"""
Planning Tests Package

- fixtures.py: Test fixtures and helper functions
- test_planning_copy.py: Copy service and POST /api/planning/{pk}/copy/
- test_planning_api.py: Planning CRUD endpoints
"""
