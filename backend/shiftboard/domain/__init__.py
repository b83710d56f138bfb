"""
Domain Layer

Business concepts of shift scheduling, independent of persistence and
transport:
- scheduling/: value objects, entities, the store interface and commands
- shared/: exceptions shared across the domain
"""
