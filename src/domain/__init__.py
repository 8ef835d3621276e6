"""Domain layer - Shared building blocks.

This layer contains the base entity, the base domain event and the protocols
(ports) every module may depend on. It has NO dependencies on any framework
or infrastructure - it is pure Python.

Structure:
- entities/: Entity base class and EntityChange (state transition result)
- events/: DomainEvent base class
- protocols/: Logger and event bus ports

Module-specific domain code lives inside each module (src/modules/<name>/domain).
"""
