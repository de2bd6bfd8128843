"""
CarePass - REST backend for the CarePass healthcare membership platform.
"""
