"""
Vehicle Inventory GraphQL API.

Typed query/mutation gateway over a MongoDB inventory of vehicles and parts.
"""
__version__ = "1.0.0"
