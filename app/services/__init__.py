"""Business logic services.

Services hold the account/catalog rules and are called by routes.
Stores are passed in explicitly so routes (and tests) decide which one is used.
"""
