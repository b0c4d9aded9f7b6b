"""
Boundary layer.

Adapters for external collaborators: hosted gateway functions, object
storage and relational persistence.
"""
