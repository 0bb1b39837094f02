"""
Notebox feature modules: auth, notes, tags and dashboard.

A module keeps its models, exceptions, repository, service and routes
together and exposes an ``I*Service`` protocol in interfaces.py. Routes
get services through api.dependencies; modules never build each other's
services directly. The dashboard reuses the notes repository's row
mapping, which is the only cross-module import of a concrete class.
"""
