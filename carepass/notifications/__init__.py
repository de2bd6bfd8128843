"""
Transactional email: composition and dispatch.
"""
