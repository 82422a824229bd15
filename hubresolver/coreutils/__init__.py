"""
Core Utilities - Environment, Logging, HTTP

Small helpers shared by the framework and hub layers.
"""
