"""
Mock authentication (signup form validation + users record). Provides no access control.
"""
