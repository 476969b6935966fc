"""
Local file helpers.
"""
