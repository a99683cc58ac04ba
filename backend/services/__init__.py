"""
Services consuming simulation snapshots (renderers).
"""
