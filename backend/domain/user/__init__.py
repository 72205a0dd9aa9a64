"""User domain module.

This domain manages user accounts: e-mail identity, salted password
hashes and the lifecycle events emitted by the application services.
"""
