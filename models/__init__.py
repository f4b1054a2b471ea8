"""
Data models for manuscripts and journal matching results
"""
