"""
Application layer.

Services implementing the operations exposed to clients.
"""
