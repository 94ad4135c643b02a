"""
Controllers Package

Contains the Flask blueprints and error handlers of the HTTP API.
"""
