"""
Uploads app

File uploads written to MEDIA_ROOT and the Media rows that point at them.
"""
