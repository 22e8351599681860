"""
AI Provider实现
"""
