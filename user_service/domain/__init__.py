"""
Domain layer: the User entity, its repository contract and the
exceptions raised when business rules are broken.
"""
