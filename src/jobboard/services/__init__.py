"""
Job board services: query engine, form validation and the HTTP API.
"""
