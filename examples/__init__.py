"""Example point types and writers for influxline.

This package demonstrates library usage but is not part of the core API.
"""
