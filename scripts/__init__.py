"""
Module: scripts
Description: Developer scripts for KeyAuth.
"""
