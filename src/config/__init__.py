"""
Static catalog payload and page template.
"""
