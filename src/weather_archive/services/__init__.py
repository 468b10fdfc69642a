"""Shared utilities used by the data sources.

Modules:
- http: ``requests.Session`` factory with default timeout and User-Agent
"""
