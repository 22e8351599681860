"""
存储适配器模块
提供各种对象存储服务的适配器实现
"""

from app.core.storage.adapters.supabase_storage import SupabaseStorageAdapter

__all__ = [
    'SupabaseStorageAdapter',
]
