"""
Prompt templates for the journal matching model
"""
