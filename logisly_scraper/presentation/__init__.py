"""
Presentation Layer - HTTP API, CLI and Output Formatting
"""
