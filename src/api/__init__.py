"""
Persisted user preferences.
"""
