"""
Configuration loading and validation.

Provides a strongly typed settings object for converter defaults read from
environment variables (and an optional .env file).
"""
