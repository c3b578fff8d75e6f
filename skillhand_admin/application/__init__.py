"""
Application layer: gateway interfaces, services and use cases.
"""
