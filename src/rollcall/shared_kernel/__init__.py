"""Shared Kernel module.

Foundational components shared by the roster bounded context and the
infrastructure adapters: the key-value storage port, its error type, and the
observation context carried by domain probes.

Changes here affect every consumer and should be kept small.
"""
