"""
HTTP API for n8n
"""
