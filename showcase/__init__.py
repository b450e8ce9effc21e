"""
Showcase app

Career highlights, contributions and recommended books.
"""
