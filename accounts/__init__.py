"""
Accounts app

Back-office users. Public visitors are anonymous; only authenticated
back-office users can change portfolio content.
"""
