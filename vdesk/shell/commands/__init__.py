"""
Shell command modules
"""
