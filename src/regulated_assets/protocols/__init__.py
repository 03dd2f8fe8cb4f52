"""
Protocols Package
=================

Wire-level protocol clients.

Modules:
--------
- approval: regulated asset transaction approval and follow-up actions
"""
