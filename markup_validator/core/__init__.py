"""
core
----
Exceptions, logging, paths and CLI helpers shared by all components.
"""
