"""
Employee API.
REST service exposing CRUD operations over employee records stored in MongoDB.
"""
__version__ = "1.0.0"
