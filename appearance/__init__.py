"""
Appearance app

Navbar and footer configuration for the public site.
"""
