"""
Web API
"""
