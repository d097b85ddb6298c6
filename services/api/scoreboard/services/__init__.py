"""Business logic services.

Services contain all business logic and are called by routes.
Stores are the only layer that talks to Redis.
"""
