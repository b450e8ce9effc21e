"""
resumeflex project package: settings, root URLs and site-wide API views.
"""
