"""Application package for the study tracker backend.

This package exposes the resource registry, services, repositories and
models used by the FastAPI application. Individual modules contain the
concrete implementations and documentation.
"""
