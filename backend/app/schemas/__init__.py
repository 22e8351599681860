"""
API请求与响应模型
"""
