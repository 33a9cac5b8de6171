# Services package init
"""
Roster Backend — Services Layer
================================

Service Inventory:
    - resolver: Resource resolution by key (Found / NotFound), used by the
      route binding layer before handlers run.

There is no per-entity service class: handlers receive resolved entities
directly, and bespoke not-found messages are attached to the binding
(RouteBinding.missing), not to a service.
"""
